# futbol_nlq/config.py
"""
Environment configuration for futbol-nlq.

Values come from environment variables (the CLI loads a `.env` file first
through python-dotenv). The config object is created lazily and shared;
tests call `reset_config()` after changing the environment.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NLQConfig:
    """Query-understanding configuration from environment variables."""

    max_history: int  # queries kept in each conversation context
    low_confidence: float  # below this an intent is considered ambiguous
    max_suggestions: int
    log_level: str

    @classmethod
    def from_env(cls) -> "NLQConfig":
        """Load configuration from environment variables with defaults."""
        return cls(
            max_history=int(os.getenv("FUTBOL_NLQ_MAX_HISTORY", "10")),
            low_confidence=float(os.getenv("FUTBOL_NLQ_LOW_CONFIDENCE", "0.5")),
            max_suggestions=int(os.getenv("FUTBOL_NLQ_MAX_SUGGESTIONS", "3")),
            log_level=os.getenv("FUTBOL_NLQ_LOG_LEVEL", "INFO").upper(),
        )


# Global config singleton
_config: Optional[NLQConfig] = None


def get_config() -> NLQConfig:
    """Get global configuration."""
    global _config
    if _config is None:
        _config = NLQConfig.from_env()
        logger.debug(
            f"NLQ config: max_history={_config.max_history}, "
            f"low_confidence={_config.low_confidence}"
        )
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    global _config
    _config = None
