# futbol_nlq/api/models.py
"""
Typed result schemas for the data-fetch boundary.

Raw payloads returned by a data source (API-Football shaped JSON) are
validated into these models before the response synthesizer reads them.
Every collection defaults to empty and every nested object has a default,
and explicit nulls fall back to those defaults, so a partial or empty
payload validates into a model the analyzers can walk without checking
each level by hand.
"""

from typing import Any, Dict, List, Literal, Optional, Type

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)


class _Schema(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        # null at any level means "use the field default"
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


# ============================================================================
# ENTITY REFERENCE
# ============================================================================


class EntityReference(_Schema):
    """Resolved team/league reference with its data-source identifier."""

    entity_type: Literal["team", "league"] = Field(..., description="Entity kind")
    entity_id: int = Field(..., description="Data source identifier")
    name: str = Field(..., description="Official name")
    country: Optional[str] = Field(None, description="Country (or 'Europe')")
    confidence: float = Field(
        1.0, ge=0.0, le=1.0, description="Match confidence (0.0-1.0)"
    )
    alternate_names: List[str] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "entity_type": "team",
                "entity_id": 529,
                "name": "Barcelona",
                "country": "Spain",
                "confidence": 1.0,
                "alternate_names": ["barça", "barca", "fcb"],
            }
        }
    )


# ============================================================================
# SHARED PIECES
# ============================================================================


class TeamRef(_Schema):
    id: Optional[int] = None
    name: Optional[str] = None
    logo: Optional[str] = None


class PlayerRef(_Schema):
    id: Optional[int] = None
    name: Optional[str] = None
    nationality: Optional[str] = None


class LeagueRef(_Schema):
    id: Optional[int] = None
    name: Optional[str] = None
    country: Optional[str] = None
    season: Optional[int] = None


# ============================================================================
# FIXTURES / LIVE
# ============================================================================


class FixtureStatus(_Schema):
    short: Optional[str] = None
    long: Optional[str] = None
    elapsed: Optional[int] = None


class FixtureInfo(_Schema):
    id: Optional[int] = None
    date: Optional[str] = None
    status: FixtureStatus = Field(default_factory=FixtureStatus)


class FixtureTeams(_Schema):
    home: TeamRef = Field(default_factory=TeamRef)
    away: TeamRef = Field(default_factory=TeamRef)


class FixtureGoals(_Schema):
    home: Optional[int] = None
    away: Optional[int] = None


class FixtureItem(_Schema):
    fixture: FixtureInfo = Field(default_factory=FixtureInfo)
    league: LeagueRef = Field(default_factory=LeagueRef)
    teams: FixtureTeams = Field(default_factory=FixtureTeams)
    goals: FixtureGoals = Field(default_factory=FixtureGoals)

    @property
    def status_short(self) -> Optional[str]:
        return self.fixture.status.short


class FixturesResult(_Schema):
    response: List[FixtureItem] = Field(default_factory=list)


# ============================================================================
# STANDINGS
# ============================================================================


class StandingRow(_Schema):
    rank: Optional[int] = None
    team: TeamRef = Field(default_factory=TeamRef)
    points: int = 0
    goals_diff: Optional[int] = Field(None, alias="goalsDiff")
    form: Optional[str] = None


class StandingsLeague(LeagueRef):
    standings: List[List[StandingRow]] = Field(default_factory=list)


class StandingsItem(_Schema):
    league: Optional[StandingsLeague] = None


class StandingsResult(_Schema):
    response: List[StandingsItem] = Field(default_factory=list)

    def table(self) -> List[StandingRow]:
        """First table of the first tournament, or [] when any level is missing."""
        if not self.response:
            return []
        league = self.response[0].league
        if league is None or not league.standings:
            return []
        return league.standings[0]


# ============================================================================
# TOP SCORERS / PLAYER STATS
# ============================================================================


class GoalStats(_Schema):
    total: Optional[int] = None
    assists: Optional[int] = None


class GameStats(_Schema):
    appearences: Optional[int] = None  # sic, API-Football spelling
    minutes: Optional[int] = None
    rating: Optional[float] = None

    @field_validator("rating", mode="before")
    @classmethod
    def blank_rating_to_none(cls, value: Any) -> Any:
        """Blank or non-numeric ratings ("", "N/A") become None."""
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                return None
        return value


class PlayerStatistics(_Schema):
    team: TeamRef = Field(default_factory=TeamRef)
    league: LeagueRef = Field(default_factory=LeagueRef)
    games: GameStats = Field(default_factory=GameStats)
    goals: GoalStats = Field(default_factory=GoalStats)


class PlayerEntry(_Schema):
    player: PlayerRef = Field(default_factory=PlayerRef)
    statistics: List[PlayerStatistics] = Field(default_factory=list)

    def primary_statistics(self) -> Optional[PlayerStatistics]:
        return self.statistics[0] if self.statistics else None


class TopScorersResult(_Schema):
    response: List[PlayerEntry] = Field(default_factory=list)


class PlayerStatsResult(_Schema):
    response: List[PlayerEntry] = Field(default_factory=list)


# ============================================================================
# SCHEMA REGISTRY
# ============================================================================

RESULT_SCHEMAS: Dict[str, Type[_Schema]] = {
    "fixtures": FixturesResult,
    "live": FixturesResult,
    "standings": StandingsResult,
    "topscorers": TopScorersResult,
    "player_stats": PlayerStatsResult,
}


def validate_result(intent: str, payload: Any) -> Any:
    """
    Validate a raw payload into the schema registered for an intent.

    Args:
        intent: Intent the payload was fetched for
        payload: Raw payload (dict), an already-validated model, or None

    Returns:
        Typed model, or the payload unchanged for intents without a schema

    Raises:
        pydantic.ValidationError: If the payload does not fit the schema
    """
    schema = RESULT_SCHEMAS.get(intent)
    if schema is None:
        return payload
    if isinstance(payload, schema):
        return payload
    if payload is None:
        return schema()
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(by_alias=True)
    return schema.model_validate(payload)


__all__ = [
    "EntityReference",
    "FixturesResult",
    "StandingsResult",
    "TopScorersResult",
    "PlayerStatsResult",
    "RESULT_SCHEMAS",
    "ValidationError",
    "validate_result",
]
