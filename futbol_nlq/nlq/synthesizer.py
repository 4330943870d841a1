# futbol_nlq/nlq/synthesizer.py
"""
Response Synthesizer for futbol-nlq.

Turns fetched data into a short Spanish answer:
- One analyzer per intent derives highlights (streaks, leader, relegation
  zone, top scorer, standout players)
- An opener that depends on whether the query reads as a follow-up
- Up to three related queries to suggest next
- Optional pipe tables of the raw rows for the CLI
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from tabulate import tabulate

from ..api.models import (
    FixturesResult,
    PlayerStatsResult,
    StandingsResult,
    TopScorersResult,
    ValidationError,
    validate_result,
)
from ..config import get_config
from .context import is_follow_up_query
from .parser import ExtractedEntities, ParsedQuery

logger = logging.getLogger(__name__)

FINISHED_STATUSES = {"FT", "AET", "PEN"}
LIVE_STATUSES = {"1H", "HT", "2H", "ET", "BT", "P", "LIVE"}

STREAK_THRESHOLD = 3
GOALS_THRESHOLD = 10
ASSISTS_THRESHOLD = 5
RATING_THRESHOLD = 7.5


# ============================================================================
# DATA CLASSES
# ============================================================================


@dataclass
class DataInsights:
    """Observations derived from one dataset."""

    total_items: int = 0
    highlights: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


@dataclass
class SynthesizedResponse:
    """Final synthesized response."""

    raw_query: str
    intent: str
    answer: str
    confidence: float
    suggestions: List[str]
    metadata: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "raw_query": self.raw_query,
            "intent": self.intent,
            "answer": self.answer,
            "confidence": self.confidence,
            "suggestions": self.suggestions,
            "metadata": self.metadata,
        }

    def to_markdown(self) -> str:
        """Format as markdown."""
        md = f"# {self.raw_query}\n\n"
        md += f"{self.answer}\n\n"
        if self.suggestions:
            md += "**Sugerencias**:\n"
            for suggestion in self.suggestions:
                md += f"- {suggestion}\n"
            md += "\n"
        md += "---\n\n"
        md += f"**Confianza**: {self.confidence:.0%}\n"
        md += f"**Generado**: {self.metadata.get('timestamp', 'N/A')}\n"
        return md


# ============================================================================
# ANALYZERS
# ============================================================================


def _coerce(intent: str, data: Any) -> Any:
    """Typed result for the intent, or None when the payload is unusable."""
    try:
        return validate_result(intent, data)
    except ValidationError as e:
        logger.warning(f"Cannot analyze '{intent}' payload: {e.error_count()} validation error(s)")
        return None


def analyze_fixtures(data: Any) -> DataInsights:
    """
    Win/loss streaks and matches in progress.

    A finished match counts as a win when the home side scored more and as
    a loss when the away side did.
    """
    insights = DataInsights()
    result: Optional[FixturesResult] = _coerce("fixtures", data)
    if result is None or not result.response:
        return insights

    insights.total_items = len(result.response)

    wins = losses = draws = 0
    for item in result.response:
        if item.status_short not in FINISHED_STATUSES:
            continue
        home, away = item.goals.home, item.goals.away
        if home is None or away is None:
            continue
        if home > away:
            wins += 1
        elif home < away:
            losses += 1
        else:
            draws += 1

    if wins >= STREAK_THRESHOLD:
        insights.highlights.append(f"🔥 Buena racha: {wins} victorias")
    if losses >= STREAK_THRESHOLD:
        insights.highlights.append(f"⚠️ Momento difícil: {losses} derrotas")

    live = sum(1 for item in result.response if item.status_short in LIVE_STATUSES)
    if live > 0:
        insights.highlights.append(f"🔴 {live} partido(s) en vivo")

    logger.debug(f"Fixtures: {wins}W {losses}L {draws}D, {live} live")
    return insights


def analyze_standings(data: Any) -> DataInsights:
    """
    Leader and relegation zone.

    The relegation zone is always the last three rows, so on tables with
    fewer than three teams it overlaps the leader.
    """
    insights = DataInsights()
    result: Optional[StandingsResult] = _coerce("standings", data)
    if result is None:
        return insights

    table = result.table()
    if not table:
        return insights

    insights.total_items = len(table)

    leader = table[0]
    insights.highlights.append(f"🥇 Líder: {leader.team.name} con {leader.points} puntos")

    relegation = ", ".join(str(row.team.name) for row in table[-3:])
    insights.highlights.append(f"⚠️ Zona de descenso: {relegation}")

    return insights


def _goals_total(entry) -> Optional[int]:
    stats = entry.primary_statistics()
    return stats.goals.total if stats else None


def analyze_top_scorers(data: Any) -> DataInsights:
    """Top scorer, plus a tie note when the first two have the same goals."""
    insights = DataInsights()
    result: Optional[TopScorersResult] = _coerce("topscorers", data)
    if result is None or not result.response:
        return insights

    scorers = result.response
    insights.total_items = len(scorers)

    first = _goals_total(scorers[0])
    insights.highlights.append(
        f"⚽ Máximo goleador: {scorers[0].player.name} con {first or 0} goles"
    )

    if len(scorers) >= 2:
        second = _goals_total(scorers[1])
        if first is not None and first == second:
            insights.highlights.append(f"🤝 Empate en la cima con {first} goles")

    return insights


def analyze_player_stats(data: Any) -> DataInsights:
    """Independent goals/assists/rating checks for every player."""
    insights = DataInsights()
    result: Optional[PlayerStatsResult] = _coerce("player_stats", data)
    if result is None or not result.response:
        return insights

    insights.total_items = len(result.response)

    for entry in result.response:
        stats = entry.primary_statistics()
        if stats is None:
            continue
        name = entry.player.name
        goals = stats.goals.total or 0
        assists = stats.goals.assists or 0
        rating = stats.games.rating

        if goals > GOALS_THRESHOLD:
            insights.highlights.append(f"⚽ Excelente goleador: {name} con {goals} goles")
        if assists > ASSISTS_THRESHOLD:
            insights.highlights.append(f"🎯 Gran asistidor: {name} con {assists} asistencias")
        if rating is not None and rating > RATING_THRESHOLD:
            insights.highlights.append(f"⭐ Rating destacado: {name} ({rating:.2f})")

    return insights


ANALYZERS: Dict[str, Callable[[Any], DataInsights]] = {
    "fixtures": analyze_fixtures,
    "live": analyze_fixtures,
    "standings": analyze_standings,
    "topscorers": analyze_top_scorers,
    "player_stats": analyze_player_stats,
}


def analyze_data(intent: str, data: Any) -> DataInsights:
    """Run the analyzer for an intent; intents without one yield no insights."""
    analyzer = ANALYZERS.get(intent)
    if analyzer is None:
        return DataInsights()
    return analyzer(data)


# ============================================================================
# RESPONSE TEXT
# ============================================================================


def _render_response(query: str, insights: DataInsights) -> str:
    if is_follow_up_query(query):
        lines = ["Aquí tienes la información adicional:"]
    else:
        lines = [f"Encontré {insights.total_items} resultado(s) para tu consulta."]

    if insights.highlights:
        lines.append("")
        lines.append("**Destacados:**")
        lines.extend(f"• {highlight}" for highlight in insights.highlights)

    return "\n".join(lines)


def generate_intelligent_response(query: str, intent: str, data: Any) -> str:
    """
    Build the answer text for fetched data.

    Args:
        query: The user's query (decides the opener)
        intent: Intent the data was fetched for
        data: Typed result or raw payload

    Returns:
        Opener line, followed by a bulleted highlights block when there is one

    Examples:
        >>> generate_intelligent_response("hola", "unknown", None)
        'Encontré 0 resultado(s) para tu consulta.'
    """
    return _render_response(query, analyze_data(intent, data))


def generate_suggestions(
    intent: str, entities: ExtractedEntities, limit: Optional[int] = None
) -> List[str]:
    """
    Related queries to offer next, skipping the one just answered.

    With a team: standings of its league, the team's scorers, its upcoming
    fixtures. With only a league: its standings, its scorers, its featured
    teams.
    """
    if limit is None:
        limit = get_config().max_suggestions

    suggestions: List[str] = []

    if entities.team:
        if intent != "standings":
            suggestions.append(f"Ver clasificación de {entities.league or 'la liga'}")
        if intent != "topscorers":
            suggestions.append(f"Ver goleadores de {entities.team}")
        if intent != "fixtures":
            suggestions.append(f"Ver próximos partidos de {entities.team}")
    elif entities.league:
        if intent != "standings":
            suggestions.append(f"Ver clasificación de {entities.league}")
        if intent != "topscorers":
            suggestions.append(f"Ver goleadores de {entities.league}")
        suggestions.append(f"Ver equipos destacados de {entities.league}")

    return suggestions[:limit]


# ============================================================================
# TABLES
# ============================================================================


def _score(home: Optional[int], away: Optional[int]) -> str:
    if home is None or away is None:
        return "-"
    return f"{home}-{away}"


def format_fixtures_table(result: FixturesResult) -> str:
    headers = ["Local", "Marcador", "Visitante", "Estado"]
    rows = [
        [
            item.teams.home.name,
            _score(item.goals.home, item.goals.away),
            item.teams.away.name,
            item.status_short or "",
        ]
        for item in result.response
    ]
    return tabulate(rows, headers=headers, tablefmt="pipe")


def format_standings_table(result: StandingsResult) -> str:
    headers = ["#", "Equipo", "Pts", "DG", "Forma"]
    rows = [
        [row.rank, row.team.name, row.points, row.goals_diff, row.form or ""]
        for row in result.table()
    ]
    return tabulate(rows, headers=headers, tablefmt="pipe")


def format_players_table(result: Any) -> str:
    headers = ["Jugador", "Equipo", "Goles", "Asistencias", "Rating"]
    rows = []
    for entry in result.response:
        stats = entry.primary_statistics()
        if stats is None:
            rows.append([entry.player.name, "", None, None, None])
            continue
        rows.append(
            [
                entry.player.name,
                stats.team.name,
                stats.goals.total,
                stats.goals.assists,
                stats.games.rating,
            ]
        )
    return tabulate(rows, headers=headers, tablefmt="pipe", floatfmt=".2f")


TABLE_FORMATTERS: Dict[str, Callable[[Any], str]] = {
    "fixtures": format_fixtures_table,
    "live": format_fixtures_table,
    "standings": format_standings_table,
    "topscorers": format_players_table,
    "player_stats": format_players_table,
}


def format_result_table(intent: str, data: Any) -> str:
    """
    Render the rows of a result as a markdown pipe table.

    Returns:
        The table, or "" when the intent has no table or there are no rows
    """
    formatter = TABLE_FORMATTERS.get(intent)
    if formatter is None:
        return ""

    result = _coerce(intent, data)
    if result is None:
        return ""
    rows = result.table() if isinstance(result, StandingsResult) else result.response
    if not rows:
        return ""

    return formatter(result)


# ============================================================================
# MAIN SYNTHESIS
# ============================================================================


def synthesize_response(parsed: ParsedQuery, data: Any) -> SynthesizedResponse:
    """
    Synthesize the final response for a parsed query and its data.

    Args:
        parsed: Parsed query
        data: Typed result or raw payload fetched for the parsed intent

    Returns:
        SynthesizedResponse with answer, suggestions and metadata
    """
    intent = parsed.intent.primary
    logger.info(f"Synthesizing response for intent: {intent}")

    insights = analyze_data(intent, data)
    answer = _render_response(parsed.original, insights)
    suggestions = generate_suggestions(intent, parsed.entities)

    metadata: Dict[str, Any] = {
        "timestamp": datetime.now().isoformat(),
        "entities": parsed.entities.to_dict(),
        "is_follow_up": parsed.is_follow_up,
        "ambiguous": parsed.intent.is_ambiguous(),
        "total_items": insights.total_items,
        "highlights": list(insights.highlights),
    }
    if parsed.intent.secondary:
        metadata["secondary_intent"] = parsed.intent.secondary

    return SynthesizedResponse(
        raw_query=parsed.original,
        intent=intent,
        answer=answer,
        confidence=parsed.intent.confidence,
        suggestions=suggestions,
        metadata=metadata,
    )
