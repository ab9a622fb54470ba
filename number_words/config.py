"""
Runtime settings read from the environment.

    NUMBER_WORDS_DEFAULT_LANG   language used when a caller names none (default "en")
    NUMBER_WORDS_LOG_LEVEL      level for `configure_logging` (default "WARNING")

Entry points load a `.env` file (python-dotenv) before reading these.
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field

DEFAULT_LANG_ENV = "NUMBER_WORDS_DEFAULT_LANG"
LOG_LEVEL_ENV = "NUMBER_WORDS_LOG_LEVEL"


class Settings(BaseModel):
    default_lang: str = Field(default="en", min_length=1)
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Build Settings from the current environment (read on every call)."""
    return Settings(
        default_lang=os.environ.get(DEFAULT_LANG_ENV, "").strip() or "en",
        log_level=os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or "WARNING",
    )


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured level to the package logger."""
    settings = settings or load_settings()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("number_words").setLevel(level)
