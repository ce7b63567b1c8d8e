# owstat/config.py
"""
Defaults and runtime configuration for the profile scraper.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

BASE_URL = "https://playoverwatch.com"
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_11_6) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/52.0.2743.82 Safari/537.36"
)
DEFAULT_TIMEOUT_SECONDS = 20

DEFAULT_REGION = "us"
DEFAULT_LOCALE = "en-us"


class Platform(str, Enum):
    PC = "pc"
    PSN = "psn"
    XBL = "xbl"

    @classmethod
    def parse(cls, value: "str | Platform") -> "Platform":
        if isinstance(value, Platform):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown platform '{value}' (expected one of: {choices})")


DEFAULT_PLATFORM = Platform.PC


class PlayMode(str, Enum):
    """Element ids scoping each play mode's section of the career page."""

    QUICK_PLAY = "quick-play"
    COMPETITIVE_PLAY = "competitive-play"


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ScraperConfig:
    base_url: str = BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = USER_AGENT
    verbose: bool = False

    @classmethod
    def from_env(cls, environ=None) -> "ScraperConfig":
        """Build a config from OWSTAT_* environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        config = cls()
        if env.get("OWSTAT_BASE_URL"):
            config.base_url = env["OWSTAT_BASE_URL"].rstrip("/")
        if env.get("OWSTAT_TIMEOUT"):
            try:
                config.timeout_seconds = float(env["OWSTAT_TIMEOUT"])
            except ValueError:
                raise ValueError(f"OWSTAT_TIMEOUT must be a number, got '{env['OWSTAT_TIMEOUT']}'")
        if env.get("OWSTAT_VERBOSE"):
            config.verbose = _env_bool(env["OWSTAT_VERBOSE"])
        return config
