"""
Configuration - Settings read from the environment.

Variables:
    FREECELL_HISTORY_SIZE   Undo ring capacity (default 100, at least 2)
    FREECELL_LOG_LEVEL      Logging level (default WARNING)
    FREECELL_LOG_FORMAT     "text" or "json" (default text)
    FREECELL_LOG_FILE       Write logs here instead of stderr

Command-line flags take precedence over these values.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import os

LOG_FORMATS = ("text", "json")


@dataclass(frozen=True)
class Settings:
    """Runtime settings."""
    history_size: int = 100
    log_level: str = "WARNING"
    log_format: str = "text"
    log_file: str | None = None

    def __post_init__(self):
        if self.history_size < 2:
            raise ValueError(f"history_size must be at least 2, got {self.history_size}")
        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {self.log_format!r}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from environment variables."""
    env = os.environ if environ is None else environ
    raw_size = env.get("FREECELL_HISTORY_SIZE", "100")
    try:
        history_size = int(raw_size)
    except ValueError:
        raise ValueError(f"FREECELL_HISTORY_SIZE must be an integer, got {raw_size!r}") from None
    return Settings(
        history_size=history_size,
        log_level=env.get("FREECELL_LOG_LEVEL", "WARNING"),
        log_format=env.get("FREECELL_LOG_FORMAT", "text").lower(),
        log_file=env.get("FREECELL_LOG_FILE") or None,
    )
