# owstat/scraper/__init__.py
"""
Career page extraction.

Turns one career page into a Profile: a query layer over the parsed
document, a positional correlation check, and assemblers for the
profile, each play mode and the achievements.
"""

from .achievements import AchievementAssembler, AchievementState, classify_card
from .core import OverwatchScraper
from .correlate import correlate, correlate_mapping
from .playstat import PlayStatAssembler
from .profile import ProfileAssembler, parse_profile
from .query import DocumentQuery, parse_document

__all__ = [
    'AchievementAssembler',
    'AchievementState',
    'classify_card',
    'OverwatchScraper',
    'correlate',
    'correlate_mapping',
    'PlayStatAssembler',
    'ProfileAssembler',
    'parse_profile',
    'DocumentQuery',
    'parse_document',
]
