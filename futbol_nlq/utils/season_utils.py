"""
Season Utilities

Football seasons are keyed by their starting calendar year (API-Football
convention: the 2024-25 season is season 2024).
"""

import logging
import re
from datetime import date
from typing import Optional

logger = logging.getLogger(__name__)

SEASON_YEAR_PATTERN = re.compile(r"\b20\d{2}\b")


def current_season(today: Optional[date] = None) -> int:
    """
    Default season used when a query does not mention a year.

    This is the current calendar year, not the year the running season
    started in.

    Examples:
        >>> current_season(date(2025, 3, 1))
        2025
    """
    return (today or date.today()).year


def extract_season_year(query: str) -> Optional[int]:
    """
    Find the first 4-digit 20xx year in a query.

    Examples:
        >>> extract_season_year("goleadores de la premier 2023")
        2023
        >>> extract_season_year("partidos de hoy") is None
        True
    """
    match = SEASON_YEAR_PATTERN.search(query)
    if match:
        return int(match.group(0))
    return None


def format_season_label(season: int) -> str:
    """Format a season start year as "2024-25"."""
    return f"{season}-{str(season + 1)[-2:]}"
