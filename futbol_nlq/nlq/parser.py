# futbol_nlq/nlq/parser.py
"""
Natural Language Query Parser for football queries.

Turns free text (mixed Spanish/English) into:
- Entities (team, league, player, season, temporal expression, qualifiers)
  using the lexicon in `api.name_variations`
- One primary intent with a confidence score and optional secondary intent

Everything is deterministic substring/regex matching; there is no scoring
model. The first rule that matches decides.
"""

import logging
import re
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Dict, List, Literal, Optional

from ..api.name_variations import (
    TemporalExpression,
    extract_qualifiers,
    extract_temporal,
    find_league,
    find_team,
    normalize_action,
)
from ..config import get_config
from ..utils.season_utils import current_season, extract_season_year
from .context import ConversationContext

logger = logging.getLogger(__name__)

IntentKind = Literal[
    "fixtures",
    "standings",
    "topscorers",
    "player_stats",
    "live",
    "team_info",
    "league_info",
    "unknown",
]

SUPPORTED_INTENTS: List[str] = [
    "fixtures",
    "standings",
    "topscorers",
    "player_stats",
    "live",
    "team_info",
    "league_info",
]


# ============================================================================
# DATA CLASSES
# ============================================================================


@dataclass
class ExtractedEntities:
    """
    Entities found in one query.

    `team_id` / `league_id` are filled later by the id resolver, never by
    the extractor. `season` is always set.
    """

    season: int
    team: Optional[str] = None
    team_id: Optional[int] = None
    league: Optional[str] = None
    league_id: Optional[int] = None
    player: Optional[str] = None
    temporal: Optional[TemporalExpression] = None
    qualifiers: List[str] = field(default_factory=list)

    def copy(self) -> "ExtractedEntities":
        return replace(self, qualifiers=list(self.qualifiers))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for key in ("team", "team_id", "league", "league_id", "player"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        data["season"] = self.season
        if self.temporal:
            data["temporal"] = self.temporal.to_dict()
        if self.qualifiers:
            data["qualifiers"] = list(self.qualifiers)
        return data


@dataclass(frozen=True)
class IntentResult:
    """Detected intent for a query."""

    primary: IntentKind
    confidence: float
    secondary: Optional[IntentKind] = None

    def is_ambiguous(self, threshold: Optional[float] = None) -> bool:
        """True when the confidence is below the ambiguity threshold."""
        if threshold is None:
            threshold = get_config().low_confidence
        return self.confidence < threshold

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"primary": self.primary, "confidence": self.confidence}
        if self.secondary:
            data["secondary"] = self.secondary
        return data


@dataclass
class ParsedQuery:
    """Structured representation of a natural language query."""

    original: str
    intent: IntentResult
    entities: ExtractedEntities
    is_follow_up: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original": self.original,
            "intent": self.intent.to_dict(),
            "entities": self.entities.to_dict(),
            "is_follow_up": self.is_follow_up,
        }


# ============================================================================
# ENTITY EXTRACTION
# ============================================================================

_NAME = r"([a-záéíóúñ\s]+?)"
_NAME_END = r"(?:\s+en|\s+de|\s+con|$)"

# Tried in order; the first template yielding an acceptable name wins.
PLAYER_PATTERNS = [
    re.compile(
        r"(?:goles?|stats?|estadisticas?)\s+(?:de|del|de\s+la)\s+" + _NAME + _NAME_END,
        re.IGNORECASE,
    ),
    re.compile(r"jugador\s+" + _NAME + _NAME_END, re.IGNORECASE),
    re.compile(r"stats\s+" + _NAME + _NAME_END, re.IGNORECASE),
]

PLAYER_STOP_WORDS = {"la", "el", "los", "las", "mi", "tu"}


def extract_player(query: str) -> Optional[str]:
    """
    Extract a player name from phrases like "goles de Messi" or "jugador Pedri".

    Examples:
        >>> extract_player("goles de Messi")
        'Messi'
        >>> extract_player("estadisticas de la") is None
        True
    """
    for pattern in PLAYER_PATTERNS:
        match = pattern.search(query)
        if not match:
            continue
        candidate = match.group(1).strip()
        if candidate and candidate.lower() not in PLAYER_STOP_WORDS:
            return candidate

    return None


def extract_entities(query: str, today: Optional[date] = None) -> ExtractedEntities:
    """
    Extract all known entities from a query.

    Steps:
    1. Team from the lexicon; its league is inferred
    2. League from the lexicon (an explicit league overrides the inferred one)
    3. Player name from phrase templates
    4. Temporal expression and qualifiers
    5. Season year (defaults to the current year)

    Args:
        query: Natural language query
        today: Reference date for the default season

    Returns:
        ExtractedEntities (season always set, everything else optional)

    Examples:
        >>> extract_entities("partidos del real madrid en la bundesliga").league
        'Bundesliga'
    """
    season = extract_season_year(query)
    entities = ExtractedEntities(
        season=season if season is not None else current_season(today)
    )

    team = find_team(query)
    if team:
        entities.team = team.official
        if team.league:
            entities.league = team.league

    league = find_league(query)
    if league:
        entities.league = league.official

    entities.player = extract_player(query)

    temporal = extract_temporal(query)
    if temporal:
        entities.temporal = temporal

    qualifiers = extract_qualifiers(query)
    if qualifiers:
        entities.qualifiers = qualifiers

    logger.debug(f"Extracted entities: {entities.to_dict()}")
    return entities


# ============================================================================
# INTENT DETECTION
# ============================================================================

PLAYER_KEYWORDS = ("jugador", "stats de", "estadisticas de")

ACTION_INTENTS: Dict[str, IntentKind] = {
    "standings": "standings",
    "scorers": "topscorers",
    "live": "live",
    "fixtures": "fixtures",
    "matches": "fixtures",
    "results": "fixtures",
}

# (keywords, intent) checked in order when nothing else matched
KEYWORD_FALLBACKS = [
    (("tabla", "posiciones"), "standings"),
    (("goleador",), "topscorers"),
    (("partido", "juego", "resultado"), "fixtures"),
    (("vivo", "directo"), "live"),
]


def detect_intent(query: str, entities: ExtractedEntities) -> IntentResult:
    """
    Classify a query into one primary intent.

    Rules are checked in order and the first match decides:
    1. Player mentioned -> player_stats
    2. Normalized action from the lexicon
    3. Team mentioned -> fixtures (with team_info as secondary)
    4. League mentioned -> standings (with fixtures as secondary)
    5. Keyword fallback
    6. fixtures with low confidence

    Never returns "unknown": a usable guess is always proposed, and the
    confidence tells the caller how weak it is.
    """
    query_lower = query.lower()

    if entities.player or any(k in query_lower for k in PLAYER_KEYWORDS):
        logger.debug("Matched intent 'player_stats' (player rule)")
        return IntentResult("player_stats", 0.9)

    action = normalize_action(query)
    if action in ACTION_INTENTS:
        logger.debug(f"Matched intent '{ACTION_INTENTS[action]}' from action '{action}'")
        return IntentResult(ACTION_INTENTS[action], 0.9)
    if action == "stats":
        if entities.team:
            return IntentResult("team_info", 0.7)
        return IntentResult("fixtures", 0.6)

    if entities.team:
        if "contra" in query_lower or "vs" in query_lower:
            return IntentResult("fixtures", 0.8)
        return IntentResult("fixtures", 0.6, secondary="team_info")

    if entities.league:
        return IntentResult("standings", 0.7, secondary="fixtures")

    for keywords, intent in KEYWORD_FALLBACKS:
        if any(k in query_lower for k in keywords):
            logger.debug(f"Matched intent '{intent}' from keyword fallback")
            return IntentResult(intent, 0.8)

    logger.debug("No intent rule matched, defaulting to fixtures")
    return IntentResult("fixtures", 0.3)


# ============================================================================
# MAIN PARSER
# ============================================================================


def parse_query(query: str, context: ConversationContext) -> ParsedQuery:
    """
    Parse a natural language football query.

    Pipeline:
    1. Extract entities from the query text
    2. Check whether it opens like a follow-up (before context changes)
    3. Fill missing entities from the conversation context
    4. Detect intent on the resolved entities
    5. Record the query in the context

    Args:
        query: Natural language query
        context: The conversation's context (updated in place)

    Returns:
        ParsedQuery

    Examples:
        >>> ctx = ConversationContext()
        >>> parse_query("clasificacion de la premier league", ctx).intent
        IntentResult(primary='standings', confidence=0.9, secondary=None)
    """
    logger.info(f"Parsing query: '{query}'")

    entities = extract_entities(query)
    is_follow_up = context.is_follow_up(query)
    entities = context.resolve_references(query, entities)
    intent = detect_intent(query, entities)
    context.update_context(query, entities, intent.primary)

    logger.info(
        f"Parse complete: intent={intent.primary}, confidence={intent.confidence:.2f}, "
        f"follow_up={is_follow_up}"
    )

    return ParsedQuery(
        original=query,
        intent=intent,
        entities=entities,
        is_follow_up=is_follow_up,
    )
