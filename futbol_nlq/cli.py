# futbol_nlq/cli.py
"""
Command line interface for futbol-nlq.

One-shot:
    futbol-nlq --query "goleadores de la liga" --table

Interactive (one conversation, follow-ups allowed):
    futbol-nlq
    ⚽ > partidos de Barcelona
    ⚽ > y ahora la clasificacion
    ⚽ > /nueva     (forget the conversation)
    ⚽ > /salir

Data comes from the in-memory sample source.
"""

import argparse
import json
import logging
from typing import List, Optional

from dotenv import load_dotenv
from tabulate import tabulate

from .api.errors import FutbolNLQError
from .api.name_variations import get_variations_stats
from .config import get_config
from .nlq.context import ConversationContext
from .nlq.executor import DataFetcher
from .nlq.mock_tools import MockFootballFetcher
from .nlq.pipeline import run_query
from .nlq.synthesizer import format_result_table
from .utils.season_utils import format_season_label

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
PROMPT = "⚽ > "
NEW_CONVERSATION = "/nueva"
EXIT = "/salir"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="futbol-nlq",
        description="Consultas de fútbol en lenguaje natural",
    )
    parser.add_argument(
        "--query",
        "-q",
        action="append",
        default=[],
        help="Query to answer (repeatable; later queries can be follow-ups)",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Also print the fetched rows as a table",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parse and the full response as JSON",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print lexicon statistics and exit",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVELS,
        help="Logging level (default: FUTBOL_NLQ_LOG_LEVEL or INFO)",
    )
    return parser


def answer_turn(
    query: str,
    context: ConversationContext,
    fetcher: DataFetcher,
    show_table: bool = False,
    as_json: bool = False,
) -> str:
    """
    Answer one query and render it for the terminal.

    Errors from the data source become the text shown for this turn.
    """
    try:
        result = run_query(query, context, fetcher)
    except FutbolNLQError as e:
        logger.debug(f"Query failed: {e.to_dict()}")
        return f"❌ {e.message}"

    if as_json:
        payload = {
            "parsed": result.parsed.to_dict(),
            "response": result.response.to_dict(),
        }
        return json.dumps(payload, ensure_ascii=False, indent=2)

    parts = [result.response.answer]

    if show_table:
        table = format_result_table(result.fetch.intent, result.fetch.data)
        if table:
            season = format_season_label(result.parsed.entities.season)
            parts.append(f"Temporada {season}\n\n{table}")

    if result.response.suggestions:
        lines = ["Sugerencias:"] + [f"  - {s}" for s in result.response.suggestions]
        parts.append("\n".join(lines))

    return "\n\n".join(parts)


def print_stats() -> None:
    stats = get_variations_stats()
    print(tabulate(list(stats.items()), headers=["Tabla", "Entradas"], tablefmt="pipe"))


def interactive_loop(fetcher: DataFetcher, show_table: bool, as_json: bool) -> None:
    context = ConversationContext()
    print(f"Escribe tu consulta ({NEW_CONVERSATION} para empezar de nuevo, {EXIT} para salir).")

    while True:
        try:
            query = input(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not query:
            continue
        if query == EXIT:
            break
        if query == NEW_CONVERSATION:
            context.clear()
            print("Nueva conversación.")
            continue

        print(answer_turn(query, context, fetcher, show_table, as_json))
        print()


def main(argv: Optional[List[str]] = None) -> int:
    """Parse CLI args and answer queries (interactive when none are given)."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    level = args.log_level or get_config().log_level
    if level not in LOG_LEVELS:
        logger.warning(f"Unknown log level '{level}', using INFO")
        level = "INFO"
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)

    if args.stats:
        print_stats()
        return 0

    fetcher = MockFootballFetcher()

    if args.query:
        context = ConversationContext()
        for query in args.query:
            print(answer_turn(query, context, fetcher, args.table, args.json))
            print()
        return 0

    interactive_loop(fetcher, args.table, args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
