"""
Golden test queries for futbol-nlq.

Each query is parsed in a fresh conversation; the expected intent,
confidence and entities must not drift when the lexicon or the intent
rules change.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class GoldenQuery:
    """
    A golden query with expected parse.

    Attributes:
        id: Unique identifier for the query
        name: Human-readable name
        query: Natural language query text
        intent: Expected primary intent
        confidence: Expected intent confidence
        team: Expected team (official name) or None
        league: Expected league (official name) or None
        player: Expected player name or None
        secondary: Expected secondary intent or None
        season: Expected season, None for the current year
    """
    id: str
    name: str
    query: str
    intent: str
    confidence: float
    team: Optional[str] = None
    league: Optional[str] = None
    player: Optional[str] = None
    secondary: Optional[str] = None
    season: Optional[int] = None


# ============================================================================
# GOLDEN QUERIES
# ============================================================================

GOLDEN_QUERIES = [
    # ────────────────────────────────────────────────────────────────────
    # STANDINGS
    # ────────────────────────────────────────────────────────────────────
    GoldenQuery(
        id="standings_001",
        name="Premier League table by official name",
        query="clasificacion de la premier league",
        intent="standings",
        confidence=0.9,
        league="Premier League",
    ),
    GoldenQuery(
        id="standings_002",
        name="Serie A table by synonym",
        query="tabla de posiciones de la serie a",
        intent="standings",
        confidence=0.9,
        league="Serie A",
    ),
    GoldenQuery(
        id="standings_003",
        name="Bare league mention",
        query="serie a",
        intent="standings",
        confidence=0.7,
        league="Serie A",
        secondary="fixtures",
    ),
    GoldenQuery(
        id="standings_004",
        name="League with explicit season",
        query="cómo va la bundesliga 2023",
        intent="standings",
        confidence=0.7,
        league="Bundesliga",
        secondary="fixtures",
        season=2023,
    ),
    # ────────────────────────────────────────────────────────────────────
    # TOP SCORERS
    # ────────────────────────────────────────────────────────────────────
    GoldenQuery(
        id="scorers_001",
        name="La Liga scorers by colloquial name",
        query="goleadores de la liga",
        intent="topscorers",
        confidence=0.9,
        league="La Liga",
    ),
    GoldenQuery(
        id="scorers_002",
        name="Champions League scorers by variation",
        query="máximos goleadores de la champions",
        intent="topscorers",
        confidence=0.9,
        league="UEFA Champions League",
    ),
    # ────────────────────────────────────────────────────────────────────
    # FIXTURES
    # ────────────────────────────────────────────────────────────────────
    GoldenQuery(
        id="fixtures_001",
        name="Team matches infer the team's league",
        query="partidos de Barcelona",
        intent="fixtures",
        confidence=0.9,
        team="Barcelona",
        league="La Liga",
    ),
    GoldenQuery(
        id="fixtures_002",
        name="Explicit league overrides the team's league",
        query="partidos del real madrid en la bundesliga",
        intent="fixtures",
        confidence=0.9,
        team="Real Madrid",
        league="Bundesliga",
    ),
    GoldenQuery(
        id="fixtures_003",
        name="Head to head picks the first team in table order",
        query="Barcelona contra Real Madrid",
        intent="fixtures",
        confidence=0.8,
        team="Real Madrid",
        league="La Liga",
    ),
    GoldenQuery(
        id="fixtures_004",
        name="Relative window",
        query="últimos 5 partidos del Arsenal",
        intent="fixtures",
        confidence=0.9,
        team="Arsenal",
        league="Premier League",
    ),
    GoldenQuery(
        id="fixtures_005",
        name="Unrecognized query falls back to fixtures",
        query="hola",
        intent="fixtures",
        confidence=0.3,
    ),
    # ────────────────────────────────────────────────────────────────────
    # LIVE / PLAYERS / TEAMS
    # ────────────────────────────────────────────────────────────────────
    GoldenQuery(
        id="live_001",
        name="Live matches",
        query="que hay en vivo",
        intent="live",
        confidence=0.9,
    ),
    GoldenQuery(
        id="player_001",
        name="Player goals",
        query="goles de Messi",
        intent="player_stats",
        confidence=0.9,
        player="Messi",
    ),
    GoldenQuery(
        id="team_001",
        name="Team data",
        query="datos del Chelsea",
        intent="team_info",
        confidence=0.7,
        team="Chelsea",
        league="Premier League",
    ),
]


def get_query_by_id(query_id: str) -> GoldenQuery:
    """
    Get a golden query by ID.

    Raises:
        ValueError: If query ID not found
    """
    for query in GOLDEN_QUERIES:
        if query.id == query_id:
            return query
    raise ValueError(f"Query ID not found: {query_id}")


def get_queries_by_intent(intent: str) -> List[GoldenQuery]:
    """Get all queries with a specific intent."""
    return [q for q in GOLDEN_QUERIES if q.intent == intent]


def get_all_intents() -> List[str]:
    """Get list of all intents."""
    return sorted(set(q.intent for q in GOLDEN_QUERIES))


def get_query_statistics() -> Dict[str, Any]:
    """Get statistics about golden queries."""
    return {
        "total_queries": len(GOLDEN_QUERIES),
        "intents": {intent: len(get_queries_by_intent(intent)) for intent in get_all_intents()},
    }
