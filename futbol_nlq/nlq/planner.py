# futbol_nlq/nlq/planner.py
"""
Request Planner for futbol-nlq.

Maps an intent plus its resolved entities to an API-Football style request
(endpoint and query parameters). Data sources build their request through
here so that unsupported intents and missing entities fail the same way
for every source.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Callable, Dict, Optional

from ..api.errors import MissingEntityError, UnsupportedIntentError
from .parser import ExtractedEntities

logger = logging.getLogger(__name__)

# Fixture window when no temporal expression narrows it
DEFAULT_LAST_UNFILTERED = 20
DEFAULT_LAST_FILTERED = 10

DAY_OFFSETS = {"today": 0, "yesterday": -1, "tomorrow": 1}


# ============================================================================
# REQUEST PLAN
# ============================================================================


@dataclass
class RequestPlan:
    """A single data-source request."""

    endpoint: str
    intent: str
    params: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"endpoint": self.endpoint, "intent": self.intent, "params": self.params}

    def to_path(self) -> str:
        """Endpoint with its query string, e.g. `standings?league=140&season=2024`."""
        if not self.params:
            return self.endpoint
        query = "&".join(f"{k}={v}" for k, v in self.params.items())
        return f"{self.endpoint}?{query}"


# ============================================================================
# PER-INTENT BUILDERS
# ============================================================================


def _plan_fixtures(entities: ExtractedEntities, today: date) -> RequestPlan:
    params: Dict[str, Any] = {}
    if entities.team_id:
        params["team"] = entities.team_id
    if entities.league_id:
        params["league"] = entities.league_id
    params["season"] = entities.season

    temporal = entities.temporal
    if temporal and temporal.type == "last_n" and temporal.value:
        params["last"] = temporal.value
    elif temporal and temporal.type == "next_n" and temporal.value:
        params["next"] = temporal.value
    elif temporal and temporal.type in DAY_OFFSETS:
        day = today + timedelta(days=DAY_OFFSETS[temporal.type])
        params["date"] = day.isoformat()
    elif not entities.team_id and not entities.league_id:
        params["last"] = DEFAULT_LAST_UNFILTERED
    else:
        params["last"] = DEFAULT_LAST_FILTERED

    return RequestPlan(endpoint="fixtures", intent="fixtures", params=params)


def _plan_live(entities: ExtractedEntities, today: date) -> RequestPlan:
    params: Dict[str, Any] = {"live": "all"}
    if entities.league_id:
        params["league"] = entities.league_id
    return RequestPlan(endpoint="fixtures", intent="live", params=params)


def _plan_standings(entities: ExtractedEntities, today: date) -> RequestPlan:
    if not entities.league_id:
        raise MissingEntityError(
            "standings", "league", hint="clasificación de la premier league"
        )
    return RequestPlan(
        endpoint="standings",
        intent="standings",
        params={"league": entities.league_id, "season": entities.season},
    )


def _plan_topscorers(entities: ExtractedEntities, today: date) -> RequestPlan:
    if not entities.league_id:
        raise MissingEntityError("topscorers", "league", hint="goleadores de la liga")
    return RequestPlan(
        endpoint="players/topscorers",
        intent="topscorers",
        params={"league": entities.league_id, "season": entities.season},
    )


def _plan_player_stats(entities: ExtractedEntities, today: date) -> RequestPlan:
    if not entities.player:
        raise MissingEntityError("player_stats", "player", hint="goles de Lewandowski")
    params: Dict[str, Any] = {"search": entities.player, "season": entities.season}
    if entities.league_id:
        params["league"] = entities.league_id
    if entities.team_id:
        params["team"] = entities.team_id
    return RequestPlan(endpoint="players", intent="player_stats", params=params)


def _plan_team_info(entities: ExtractedEntities, today: date) -> RequestPlan:
    if entities.team_id:
        params: Dict[str, Any] = {"id": entities.team_id}
    elif entities.team:
        params = {"search": entities.team}
    else:
        raise MissingEntityError("team_info", "team", hint="estadisticas del Barcelona")
    return RequestPlan(endpoint="teams", intent="team_info", params=params)


def _plan_league_info(entities: ExtractedEntities, today: date) -> RequestPlan:
    params: Dict[str, Any] = {"season": entities.season}
    if entities.league_id:
        params["id"] = entities.league_id
    elif entities.league:
        params["search"] = entities.league
    return RequestPlan(endpoint="leagues", intent="league_info", params=params)


PLAN_BUILDERS: Dict[str, Callable[[ExtractedEntities, date], RequestPlan]] = {
    "fixtures": _plan_fixtures,
    "live": _plan_live,
    "standings": _plan_standings,
    "topscorers": _plan_topscorers,
    "player_stats": _plan_player_stats,
    "team_info": _plan_team_info,
    "league_info": _plan_league_info,
}


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================


def build_request(
    intent: str, entities: ExtractedEntities, today: Optional[date] = None
) -> RequestPlan:
    """
    Build the data-source request for an intent.

    Args:
        intent: Detected intent
        entities: Entities with ids already resolved
        today: Reference date for "hoy"/"ayer"/"mañana"

    Returns:
        RequestPlan

    Raises:
        UnsupportedIntentError: If no request exists for the intent
        MissingEntityError: If the intent needs an entity the query lacks

    Examples:
        >>> build_request("live", ExtractedEntities(season=2024)).to_path()
        'fixtures?live=all'
    """
    builder = PLAN_BUILDERS.get(intent)
    if builder is None:
        raise UnsupportedIntentError(intent)

    plan = builder(entities, today or date.today())
    logger.debug(f"Request plan for '{intent}': {plan.to_path()}")
    return plan
