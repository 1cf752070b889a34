"""
Environment-driven defaults for the command line.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LadderSettings:
    title: Optional[str] = None
    gh_pages: bool = False
    log_level: str = "WARNING"


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"ELO_LADDER_LOG_LEVEL is not a valid log level: {value!r}")
    return level


def load_settings() -> LadderSettings:
    """
    Load settings from the environment (and a ``.env`` file if present).

    Recognised variables are ``ELO_LADDER_TITLE``, ``ELO_LADDER_GH_PAGES``
    and ``ELO_LADDER_LOG_LEVEL``.

    Raises:
        ValueError: If ``ELO_LADDER_LOG_LEVEL`` is not a logging level name
    """
    load_dotenv()

    title = os.getenv("ELO_LADDER_TITLE") or None
    gh_pages = os.getenv("ELO_LADDER_GH_PAGES", "").strip().lower() in TRUTHY
    log_level = _parse_log_level(os.getenv("ELO_LADDER_LOG_LEVEL", "WARNING"))

    return LadderSettings(title=title, gh_pages=gh_pages, log_level=log_level)
