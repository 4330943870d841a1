# __main__.py
import logging
import sys

# Configure logging right away; cli.main applies the configured level
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Entry point for `python -m futbol_nlq`."""
    try:
        from futbol_nlq.cli import main as cli_main
    except ModuleNotFoundError as e:
        logger.error("ModuleNotFoundError in __main__: %s", e)
        sys.exit(1)
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
