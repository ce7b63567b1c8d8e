# owstat/__init__.py
"""
owstat: Overwatch career profile extraction.

Fetches a player's public career page and extracts it into a typed Profile,
which can be serialized to JSON, rendered as an HTML report, or composed into
a 320x50 PNG banner.
"""

from .config import Platform, PlayMode, ScraperConfig
from .errors import (
    CorrelationMismatch,
    EncodeError,
    FetchError,
    OwstatError,
    ParseError,
    SelectorNotFound,
)
from .models import (
    Achievement,
    AchievementCategory,
    CareerStat,
    CareerStatCategory,
    Hero,
    PlayStat,
    Profile,
)
from .scraper import OverwatchScraper, parse_profile

__version__ = "0.3.0"

__all__ = [
    'Platform',
    'PlayMode',
    'ScraperConfig',
    'CorrelationMismatch',
    'EncodeError',
    'FetchError',
    'OwstatError',
    'ParseError',
    'SelectorNotFound',
    'Achievement',
    'AchievementCategory',
    'CareerStat',
    'CareerStatCategory',
    'Hero',
    'PlayStat',
    'Profile',
    'OverwatchScraper',
    'parse_profile',
]
