"""
Environment configuration and logging setup.

Values come from the process environment, optionally seeded from a .env file.
Variables already set in the environment take precedence over the file.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from .errors import ConfigError

DEFAULT_ENDPOINT = "https://api.mymemory.translated.net/get"
DEFAULT_SOURCE_LANG = "sk"
DEFAULT_TIMEOUT = 30.0

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    email: str = ""
    endpoint: str = DEFAULT_ENDPOINT
    source_lang: str = DEFAULT_SOURCE_LANG
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"


def _parse_timeout(raw: Optional[str]) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"TRANSLATION_TIMEOUT must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"TRANSLATION_TIMEOUT must be positive, got {raw!r}")
    return value


def load_settings(env_file: Optional[Union[str, Path]] = None) -> Settings:
    """Load .env (if present) and build Settings from the environment."""
    if env_file is not None:
        load_dotenv(env_file, override=False)

    return Settings(
        email=os.getenv("TRANSLATION_EMAIL", "").strip(),
        endpoint=os.getenv("TRANSLATION_ENDPOINT", "").strip() or DEFAULT_ENDPOINT,
        source_lang=os.getenv("TRANSLATION_SOURCE_LANG", "").strip() or DEFAULT_SOURCE_LANG,
        timeout=_parse_timeout(os.getenv("TRANSLATION_TIMEOUT")),
        log_level=os.getenv("LOG_LEVEL", "").strip().upper() or "INFO",
    )


def setup_logging(level: Union[str, int] = "INFO") -> None:
    """Configure the root logger for console output."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stdout)
    logging.getLogger().setLevel(level)

    # Keep connection-pool chatter out of the run log.
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
