"""
Golden tests for the most common football queries.

These tests pin the parse (intent, confidence, entities) of representative
queries so that lexicon or rule changes cannot silently change them.

Run with:
    pytest tests/test_golden_queries.py -v
"""

import pytest

from golden import GOLDEN_QUERIES, GoldenQuery, get_query_by_id, get_query_statistics
from futbol_nlq.nlq.context import ConversationContext
from futbol_nlq.nlq.parser import SUPPORTED_INTENTS, parse_query
from futbol_nlq.utils.season_utils import current_season


# ============================================================================
# GOLDEN TESTS
# ============================================================================


@pytest.mark.parametrize("query", GOLDEN_QUERIES, ids=[q.id for q in GOLDEN_QUERIES])
def test_golden_query(query: GoldenQuery):
    """Parse of each golden query in a fresh conversation."""
    parsed = parse_query(query.query, ConversationContext())

    assert parsed.intent.primary == query.intent
    assert parsed.intent.confidence == pytest.approx(query.confidence)
    assert parsed.intent.secondary == query.secondary
    assert parsed.entities.team == query.team
    assert parsed.entities.league == query.league
    assert parsed.entities.player == query.player
    assert parsed.entities.season == (query.season or current_season())
    assert parsed.is_follow_up is False


def test_golden_query_coverage():
    """Golden queries cover every intent the detector can return."""
    stats = get_query_statistics()
    covered = set(stats["intents"])
    assert covered == set(SUPPORTED_INTENTS) - {"league_info"}


def test_query_ids_unique():
    ids = [q.id for q in GOLDEN_QUERIES]
    assert len(ids) == len(set(ids))


def test_get_query_by_id():
    assert get_query_by_id("scorers_001").query == "goleadores de la liga"
    with pytest.raises(ValueError):
        get_query_by_id("missing_999")
