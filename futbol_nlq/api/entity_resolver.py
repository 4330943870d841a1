# futbol_nlq/api/entity_resolver.py
"""
Entity resolution for the data-fetch boundary.

Maps team and league names (official names or any lexicon variation) to
API-Football identifiers. Used to fill `team_id` / `league_id` on the
extracted entities before a request is built. A name that cannot be
resolved is not fatal for the pipeline: the id is simply left unset.
"""

import logging
from difflib import SequenceMatcher
from functools import lru_cache
from typing import Dict, List, Literal, Optional

from .errors import EntityNotFoundError
from .models import EntityReference
from .name_variations import (
    LEAGUE_DICTIONARY,
    TEAM_DICTIONARY,
    find_league,
    find_team,
)

logger = logging.getLogger(__name__)


# ============================================================================
# IDENTIFIER TABLES (API-Football v3)
# ============================================================================

TEAM_IDS: Dict[str, int] = {
    "Real Madrid": 541,
    "Barcelona": 529,
    "Atletico Madrid": 530,
    "Manchester United": 33,
    "Manchester City": 50,
    "Liverpool": 40,
    "Chelsea": 49,
    "Arsenal": 42,
    "Juventus": 496,
    "Inter Milan": 505,
    "AC Milan": 489,
    "Bayern Munich": 157,
    "Borussia Dortmund": 165,
    "Paris Saint-Germain": 85,
    "Boca Juniors": 451,
    "River Plate": 435,
}

LEAGUE_IDS: Dict[str, int] = {
    "Premier League": 39,
    "La Liga": 140,
    "Serie A": 135,
    "Bundesliga": 78,
    "Ligue 1": 61,
    "UEFA Champions League": 2,
    "UEFA Europa League": 3,
    "Liga MX": 262,
    "Liga BetPlay": 239,
    "Liga Argentina": 128,
}


# ============================================================================
# CACHED LOOKUPS
# ============================================================================


@lru_cache(maxsize=1000)
def _cached_team_lookup(query_lower: str) -> Optional[str]:
    """Official team name for an official name or variation, else None."""
    for official in TEAM_IDS:
        if query_lower == official.lower():
            return official

    team = find_team(query_lower)
    if team and team.official in TEAM_IDS:
        return team.official

    return None


@lru_cache(maxsize=1000)
def _cached_league_lookup(query_lower: str) -> Optional[str]:
    """Official league name for an official name or variation, else None."""
    for official in LEAGUE_IDS:
        if query_lower == official.lower():
            return official

    league = find_league(query_lower)
    if league and league.official in LEAGUE_IDS:
        return league.official

    return None


# ============================================================================
# CONFIDENCE SCORING
# ============================================================================


def calculate_match_confidence(query: str, candidate: str) -> float:
    """
    Calculate confidence score for a match (0.0 to 1.0).

    Uses SequenceMatcher for similarity scoring.
    """
    return SequenceMatcher(None, query.lower(), candidate.lower()).ratio()


def _rank_names(query: str, names: List[str], limit: int) -> List[str]:
    scored = [(name, calculate_match_confidence(query, name)) for name in names]
    scored.sort(key=lambda x: x[1], reverse=True)
    return [name for name, _ in scored[:limit]]


def suggest_teams(query: str, limit: int = 3) -> List[str]:
    """Closest official team names for an unresolved query."""
    return _rank_names(query, list(TEAM_IDS), limit)


def suggest_leagues(query: str, limit: int = 3) -> List[str]:
    """Closest official league names for an unresolved query."""
    return _rank_names(query, list(LEAGUE_IDS), limit)


# ============================================================================
# RESOLVERS
# ============================================================================


def resolve_team_id(name: str) -> Optional[int]:
    """
    Resolve a team name to its API-Football id.

    Args:
        name: Official name or any lexicon variation ("Barça", "man city")

    Returns:
        Team id, or None when the team is unknown
    """
    official = _cached_team_lookup(name.lower().strip())
    return TEAM_IDS[official] if official else None


def resolve_league_id(name: str) -> Optional[int]:
    """Resolve a league name to its API-Football id (None when unknown)."""
    official = _cached_league_lookup(name.lower().strip())
    return LEAGUE_IDS[official] if official else None


def _team_reference(official: str, query: str) -> EntityReference:
    entry = next(t for t in TEAM_DICTIONARY.values() if t.official == official)
    exact = query.lower().strip() == official.lower()
    return EntityReference(
        entity_type="team",
        entity_id=TEAM_IDS[official],
        name=official,
        country=entry.country,
        confidence=1.0 if exact else 0.9,
        alternate_names=list(entry.variations),
    )


def _league_reference(official: str, query: str) -> EntityReference:
    entry = next(
        (l for l in LEAGUE_DICTIONARY.values() if l.official == official), None
    )
    exact = query.lower().strip() == official.lower()
    return EntityReference(
        entity_type="league",
        entity_id=LEAGUE_IDS[official],
        name=official,
        country=entry.country if entry else None,
        confidence=1.0 if exact else 0.9,
        alternate_names=list(entry.variations) if entry else [],
    )


def resolve_entity(
    query: str, entity_type: Optional[Literal["team", "league"]] = None
) -> EntityReference:
    """
    Resolve a name to a team or league reference.

    Teams are tried before leagues unless `entity_type` narrows the search.

    Raises:
        EntityNotFoundError: If nothing matches (with close-name suggestions)
    """
    query_lower = query.lower().strip()

    if entity_type in (None, "team"):
        official = _cached_team_lookup(query_lower)
        if official:
            return _team_reference(official, query)

    if entity_type in (None, "league"):
        official = _cached_league_lookup(query_lower)
        if official:
            return _league_reference(official, query)

    if entity_type == "league":
        suggestions = suggest_leagues(query)
    elif entity_type == "team":
        suggestions = suggest_teams(query)
    else:
        suggestions = suggest_teams(query, limit=2) + suggest_leagues(query, limit=1)

    logger.debug(f"No {entity_type or 'entity'} found for '{query}', suggestions={suggestions}")
    raise EntityNotFoundError(entity_type or "entity", query, suggestions)
