"""
Configuration Module

USE: Central place for runtime settings (API endpoint, grid shape, log level)
HOW IT WORKS:
  - Reads environment variables with sensible defaults
  - Validates numeric settings once, at load time
FITS IN PROJECT:
  - Used by the CLI to build the ScheduleClient and the grid renderer
"""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_SCHEDULE_URL = "https://statsapi.mlb.com/api/v1/schedule"
DEFAULT_GAMES_PER_ROW = 3
DEFAULT_COLUMN_WIDTH = 30
DEFAULT_LOG_LEVEL = "WARNING"

# Line score row is 24 columns wide
MIN_COLUMN_WIDTH = 24
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ScoreboardConfig:
    """Settings for one scoreboard run."""
    schedule_url: str = DEFAULT_SCHEDULE_URL
    games_per_row: int = DEFAULT_GAMES_PER_ROW
    column_width: int = DEFAULT_COLUMN_WIDTH
    log_level: str = DEFAULT_LOG_LEVEL


def _positive_int(env: Mapping[str, str], name: str, default: int, minimum: int = 1) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


def load_config(env: Optional[Mapping[str, str]] = None) -> ScoreboardConfig:
    """
    Build a ScoreboardConfig from environment variables.

    Args:
        env: Mapping to read from (defaults to os.environ)

    Returns:
        ScoreboardConfig with defaults filled in for unset variables

    Raises:
        ValueError: If a numeric setting is not an integer at or above its
            minimum, or the log level is not a standard logging level name
    """
    if env is None:
        env = os.environ

    log_level = (env.get('MLB_SCORES_LOG_LEVEL') or DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"MLB_SCORES_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    config = ScoreboardConfig(
        schedule_url=env.get('MLB_SCHEDULE_URL') or DEFAULT_SCHEDULE_URL,
        games_per_row=_positive_int(env, 'MLB_SCORES_GAMES_PER_ROW', DEFAULT_GAMES_PER_ROW),
        column_width=_positive_int(env, 'MLB_SCORES_COLUMN_WIDTH', DEFAULT_COLUMN_WIDTH, MIN_COLUMN_WIDTH),
        log_level=log_level,
    )
    logger.debug(f"Loaded config: {config}")
    return config
