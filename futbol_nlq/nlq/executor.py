# futbol_nlq/nlq/executor.py
"""
Data-fetch boundary for futbol-nlq.

Fills entity identifiers, hands the exact entity set to a data source and
validates what comes back into the typed schema for the intent. Errors
raised by a data source are not caught here; they reach the caller as-is.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Protocol

from ..api.entity_resolver import resolve_league_id, resolve_team_id
from ..api.errors import EntityNotFoundError, UpstreamSchemaError
from ..api.models import ValidationError, validate_result
from .parser import ExtractedEntities

logger = logging.getLogger(__name__)

IdResolver = Callable[[str], Optional[int]]


class DataFetcher(Protocol):
    """Anything that can fetch raw data for an intent."""

    def fetch(self, intent: str, entities: ExtractedEntities) -> Any:
        ...


# ============================================================================
# FETCH RESULT
# ============================================================================


@dataclass
class FetchResult:
    """Validated data for one intent."""

    intent: str
    entities: ExtractedEntities
    data: Any = None
    execution_time_ms: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = self.data
        if hasattr(data, "model_dump"):
            data = data.model_dump(by_alias=True)
        return {
            "intent": self.intent,
            "entities": self.entities.to_dict(),
            "data": data,
            "execution_time_ms": self.execution_time_ms,
            "metadata": self.metadata,
        }


# ============================================================================
# ID RESOLUTION
# ============================================================================


def _lookup(resolver: IdResolver, name: str) -> Optional[int]:
    try:
        return resolver(name)
    except EntityNotFoundError:
        return None


def resolve_entity_ids(
    entities: ExtractedEntities,
    team_resolver: IdResolver = resolve_team_id,
    league_resolver: IdResolver = resolve_league_id,
) -> ExtractedEntities:
    """
    Fill `team_id` / `league_id` from the entity names.

    A name the resolver does not know leaves the id unset; the request is
    then made without that filter. Ids already present are kept.

    Returns:
        A copy of the entities with ids filled where possible
    """
    resolved = entities.copy()

    if resolved.team and resolved.team_id is None:
        resolved.team_id = _lookup(team_resolver, resolved.team)
        if resolved.team_id is None:
            logger.debug(f"No id for team '{resolved.team}', fetching without team filter")

    if resolved.league and resolved.league_id is None:
        resolved.league_id = _lookup(league_resolver, resolved.league)
        if resolved.league_id is None:
            logger.debug(f"No id for league '{resolved.league}', fetching without league filter")

    return resolved


# ============================================================================
# FETCH EXECUTION
# ============================================================================


def execute_fetch(
    intent: str, entities: ExtractedEntities, fetcher: DataFetcher
) -> FetchResult:
    """
    Fetch and validate data for an intent.

    Args:
        intent: Intent to fetch
        entities: Entities passed to the fetcher unchanged
        fetcher: Data source

    Returns:
        FetchResult with the typed payload

    Raises:
        UpstreamSchemaError: If the payload does not fit the intent's schema
        Any error raised by the fetcher, unchanged
    """
    start_time = time.time()
    logger.info(f"Fetching data: intent={intent}, entities={entities.to_dict()}")

    raw = fetcher.fetch(intent, entities)

    try:
        data = validate_result(intent, raw)
    except ValidationError as e:
        logger.warning(f"Payload for '{intent}' failed validation: {e.error_count()} error(s)")
        raise UpstreamSchemaError(intent, e.errors(include_url=False)) from e

    execution_time = (time.time() - start_time) * 1000
    logger.debug(f"Fetch for '{intent}' completed in {execution_time:.1f}ms")

    return FetchResult(
        intent=intent,
        entities=entities,
        data=data,
        execution_time_ms=execution_time,
        metadata={"fetcher": type(fetcher).__name__},
    )
