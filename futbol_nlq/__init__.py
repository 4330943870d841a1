"""futbol-nlq: natural language football queries (Spanish/English)."""

from futbol_nlq.nlq.context import ConversationContext
from futbol_nlq.nlq.mock_tools import MockFootballFetcher
from futbol_nlq.nlq.parser import parse_query
from futbol_nlq.nlq.pipeline import answer_football_question
from futbol_nlq.nlq.synthesizer import generate_intelligent_response, generate_suggestions

__all__ = [
    "ConversationContext",
    "MockFootballFetcher",
    "answer_football_question",
    "generate_intelligent_response",
    "generate_suggestions",
    "parse_query",
]

__version__ = "0.1.0"
