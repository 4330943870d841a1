# futbol_nlq/nlq/context.py
"""
Conversation context for follow-up queries.

One ConversationContext per conversation. The caller creates it at session
start and passes it to `parse_query`, which reads it to back-fill entities a
follow-up query leaves out ("y ahora la clasificacion") and updates it
after every parse. Sharing one instance between concurrent conversations
mixes their follow-ups, so each session must own its own instance.
"""

import logging
from collections import deque
from typing import TYPE_CHECKING, Any, Deque, Dict, List, Optional

from ..config import get_config

if TYPE_CHECKING:
    from .parser import ExtractedEntities

logger = logging.getLogger(__name__)


# ============================================================================
# PHRASE LISTS
# ============================================================================
# The phrase list used to inherit entities and the one used to flag a
# follow-up are not the same list; both are kept as-is.

PRONOUNS = ("él", "ella", "ellos", "ese", "esa", "esos", "mismo", "misma")

ALSO_WORDS = ("también", "tambien")

INHERIT_PHRASES = ("y ahora", "ahora", "y los", "y las", "qué tal", "que tal")

FOLLOW_UP_INDICATORS = (
    "y ahora",
    "ahora muestra",
    "y los",
    "y las",
    "también",
    "tambien",
    "qué tal",
    "que tal",
    "y el",
    "y la",
)


def is_follow_up_query(query: str) -> bool:
    """
    Check whether a query opens like a follow-up ("y ahora...", "qué tal...").

    Only looks at the text, never at conversation state.
    """
    query_lower = query.lower().strip()
    return any(query_lower.startswith(indicator) for indicator in FOLLOW_UP_INDICATORS)


def has_reference_words(query: str) -> bool:
    """Pronoun/demonstrative or "también" anywhere in the query."""
    query_lower = query.lower()
    return any(p in query_lower for p in PRONOUNS) or any(
        w in query_lower for w in ALSO_WORDS
    )


def starts_with_inherit_phrase(query: str) -> bool:
    query_lower = query.lower().strip()
    return any(query_lower.startswith(p) for p in INHERIT_PHRASES)


# ============================================================================
# CONVERSATION CONTEXT
# ============================================================================


class ConversationContext:
    """Entities and queries remembered across the turns of one conversation."""

    def __init__(self, max_history: Optional[int] = None):
        if max_history is None:
            max_history = get_config().max_history
        self.max_history = max_history
        self._reset()

    def _reset(self) -> None:
        self.last_team: Optional[str] = None
        self.last_league: Optional[str] = None
        self.last_player: Optional[str] = None
        self.last_intent: Optional[str] = None
        self.query_history: Deque[str] = deque(maxlen=self.max_history)
        self.entity_history: Dict[str, Any] = {}

    def update_context(self, query: str, entities: "ExtractedEntities", intent: str) -> None:
        """
        Record a parsed query.

        Pushes the query to the front of the history (oldest entries fall off),
        overwrites the last-seen team/league/player for every entity present,
        and overwrites the last intent.
        """
        self.query_history.appendleft(query)

        if entities.team:
            self.last_team = entities.team
            self.entity_history["team"] = entities.team
        if entities.league:
            self.last_league = entities.league
            self.entity_history["league"] = entities.league
        if entities.player:
            self.last_player = entities.player
            self.entity_history["player"] = entities.player

        self.last_intent = intent

    def resolve_references(
        self, query: str, entities: "ExtractedEntities"
    ) -> "ExtractedEntities":
        """
        Fill entities the query leaves out from earlier turns.

        - Pronouns, demonstratives or "también" anywhere in the query inherit
          the last team, league and player.
        - A query that starts like a follow-up ("y ahora", "qué tal", ...)
          inherits the last team and league.

        Entities present in the query are never overwritten. Returns a copy;
        the input is not modified.
        """
        resolved = entities.copy()

        if has_reference_words(query):
            if not resolved.team and self.last_team:
                resolved.team = self.last_team
            if not resolved.league and self.last_league:
                resolved.league = self.last_league
            if not resolved.player and self.last_player:
                resolved.player = self.last_player

        if starts_with_inherit_phrase(query):
            if not resolved.team and self.last_team:
                resolved.team = self.last_team
            if not resolved.league and self.last_league:
                resolved.league = self.last_league

        if resolved != entities:
            logger.debug(f"Resolved references for '{query}': {resolved.to_dict()}")

        return resolved

    def is_follow_up(self, query: str) -> bool:
        """Check if query is a follow-up."""
        return is_follow_up_query(query)

    def get_last_entity(self, entity_type: str) -> Any:
        return self.entity_history.get(entity_type)

    def get_history(self) -> List[str]:
        """Query history, most recent first (a copy)."""
        return list(self.query_history)

    def get_state(self) -> Dict[str, Any]:
        """Snapshot of the context state."""
        return {
            "last_team": self.last_team,
            "last_league": self.last_league,
            "last_player": self.last_player,
            "last_intent": self.last_intent,
            "query_history": self.get_history(),
            "entity_history": dict(self.entity_history),
        }

    def clear(self) -> None:
        """Forget everything (new conversation)."""
        self._reset()
        logger.info("Conversation context cleared")
