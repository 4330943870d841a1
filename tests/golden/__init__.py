"""
Golden queries for futbol-nlq.

Representative Spanish/English queries with the parse they must keep
producing, used as regression tests for the lexicon and intent rules.
"""

from golden.queries import (
    GoldenQuery,
    GOLDEN_QUERIES,
    get_query_by_id,
    get_queries_by_intent,
    get_all_intents,
    get_query_statistics,
)

__all__ = [
    "GoldenQuery",
    "GOLDEN_QUERIES",
    "get_query_by_id",
    "get_queries_by_intent",
    "get_all_intents",
    "get_query_statistics",
]
