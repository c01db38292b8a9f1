"""Centralised settings for the G2 review scraper service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from the package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_TRUTHY = {"1", "true", "yes", "on"}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    # ------------------------------------------------------------------
    # HTTP server
    # ------------------------------------------------------------------
    host: str = field(
        default_factory=lambda: os.environ.get("HOST", "0.0.0.0")
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("PORT", "3001"))
    )

    # ------------------------------------------------------------------
    # Browser
    # ------------------------------------------------------------------
    headless: bool = field(
        default_factory=lambda: _env_bool("HEADLESS", "true")
    )
    # Page load and review render are separate waits with separate budgets.
    navigation_timeout: float = field(
        default_factory=lambda: float(os.environ.get("NAVIGATION_TIMEOUT", "60.0"))
    )
    review_wait_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REVIEW_WAIT_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )


def configure_logging(level: str | None = None) -> None:
    """Install the root log handler used by the CLI entry points."""
    logging.basicConfig(level=level or settings.log_level, format=LOG_FORMAT)


# Module-level singleton — import this everywhere:
#   from g2scraper.config import settings
settings = Settings()
