# futbol_nlq/nlq/pipeline.py
"""
Complete NLQ Pipeline Interface.

Provides a simple function to answer football questions in natural language.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from ..api.name_variations import get_variations_stats
from ..config import get_config
from .context import ConversationContext
from .executor import DataFetcher, FetchResult, execute_fetch, resolve_entity_ids
from .parser import SUPPORTED_INTENTS, ParsedQuery, parse_query
from .synthesizer import SynthesizedResponse, synthesize_response

logger = logging.getLogger(__name__)


# ============================================================================
# MAIN PIPELINE
# ============================================================================


def answer_football_question(
    query: str,
    context: ConversationContext,
    fetcher: DataFetcher,
    return_metadata: bool = False,
) -> Union[str, Dict[str, Any]]:
    """
    Answer a natural language question about football data.

    This is the main entry point for the NLQ pipeline. It orchestrates:
    1. Parsing the query (with follow-up resolution from `context`)
    2. Resolving team/league ids
    3. Fetching and validating data
    4. Synthesizing the answer

    Args:
        query: Natural language question (e.g., "clasificacion de la premier league")
        context: The conversation's context, updated by the parse
        fetcher: Data source
        return_metadata: If True, return the full response dict instead of the answer text

    Returns:
        Answer string, or the SynthesizedResponse dict if return_metadata=True

    Raises:
        Whatever the id resolver or the data source raises, unchanged
        (e.g. MissingEntityError, UnsupportedIntentError, DataSourceError)

    Examples:
        >>> ctx = ConversationContext()
        >>> answer_football_question("goleadores de la liga", ctx, MockFootballFetcher())
        'Encontré 3 resultado(s) para tu consulta.\\n\\n**Destacados:**\\n• ⚽ Máximo goleador: ...'
    """
    response = run_query(query, context, fetcher).response

    if return_metadata:
        return response.to_dict()
    return response.answer


@dataclass
class PipelineResult:
    """Everything one query produced, step by step."""

    parsed: ParsedQuery
    fetch: FetchResult
    response: SynthesizedResponse


def run_query(
    query: str, context: ConversationContext, fetcher: DataFetcher
) -> PipelineResult:
    """Run every pipeline step for one query and keep the intermediate results."""
    logger.info(f"Processing football question: '{query}'")

    # Step 1: Parse
    parsed = parse_query(query, context)
    if parsed.intent.is_ambiguous():
        logger.info(
            f"Low-confidence intent '{parsed.intent.primary}' "
            f"({parsed.intent.confidence:.2f}) for '{query}'"
        )

    # Step 2: Resolve ids
    entities = resolve_entity_ids(parsed.entities)

    # Step 3: Fetch
    result = execute_fetch(parsed.intent.primary, entities, fetcher)
    logger.debug(f"Fetch: {result.execution_time_ms:.1f}ms")

    # Step 4: Synthesize
    response = synthesize_response(parsed, result.data)
    response.metadata["execution_time_ms"] = result.execution_time_ms
    logger.info(
        f"Completed: {len(response.answer)} chars, confidence={response.confidence:.2f}"
    )

    return PipelineResult(parsed=parsed, fetch=result, response=response)


# ============================================================================
# BATCH PROCESSING
# ============================================================================


def answer_football_questions(
    queries: List[str], fetcher: DataFetcher, context: Optional[ConversationContext] = None
) -> List[str]:
    """
    Answer several questions in order as one conversation.

    Later queries can be follow-ups of earlier ones. A fresh context is
    used unless one is given.
    """
    context = context or ConversationContext()
    return [answer_football_question(q, context, fetcher) for q in queries]


# ============================================================================
# PIPELINE STATUS
# ============================================================================


def get_pipeline_status() -> Dict[str, Any]:
    """
    Get current pipeline status and statistics.

    Returns:
        Dictionary with pipeline info
    """
    config = get_config()
    return {
        "status": "ready",
        "supported_intents": list(SUPPORTED_INTENTS),
        "lexicon": get_variations_stats(),
        "config": {
            "max_history": config.max_history,
            "low_confidence": config.low_confidence,
            "max_suggestions": config.max_suggestions,
        },
    }
