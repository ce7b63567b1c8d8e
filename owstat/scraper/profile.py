# owstat/scraper/profile.py
"""
Profile assembly: identity fields, play-mode stats and achievements.

Identity fields are required; any missing one aborts the extraction. The
competitive rank is optional and decides whether the competitive section
is assembled at all.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup

from owstat.config import PlayMode
from owstat.errors import ParseError
from owstat.models import Profile
from .achievements import AchievementAssembler
from .playstat import PlayStatAssembler
from .query import DocumentQuery

logger = logging.getLogger(__name__)

PLAYER_NAME = "div.masthead-player > h1.header-masthead"
PLAYER_PORTRAIT = "div.masthead-player > img.player-portrait"
PLAYER_DETAIL = "p.masthead-detail"
PLAYER_LEVEL = "div.player-level > div.u-vertical-center"
PLAYER_LEVEL_FRAME = "div.player-level"
PLAYER_LEVEL_STARS = "div.player-level > div.player-rank"
COMPETITIVE_RANK = "div.competitive-rank > div"
COMPETITIVE_RANK_ICON = "div.competitive-rank > img"


class ProfileAssembler:
    """Assembles a Profile from one parsed career page."""

    def __init__(self, query: DocumentQuery):
        self.query = query

    def competitive_rank(self) -> Optional[int]:
        """The player's skill rating, or None when the page has no rank."""
        try:
            rank = self.query.integer(COMPETITIVE_RANK, required=False)
        except ParseError as e:
            logger.debug("Ignoring unreadable competitive rank: %s", e)
            return None
        if rank is None:
            logger.debug("No competitive rank on page; skipping competitive play")
        return rank

    def assemble(self, battletag: str, platform: str, region: str) -> Profile:
        q = self.query

        name = q.scalar(PLAYER_NAME)
        profile_image_url = q.attr(PLAYER_PORTRAIT, "src")
        level = q.integer(PLAYER_LEVEL)
        level_image_url = q.style_url(PLAYER_LEVEL_FRAME)
        level_star_image_url = q.style_url(PLAYER_LEVEL_STARS, required=False) or ""
        detail = (q.scalar(PLAYER_DETAIL, required=False) or "").strip()

        rank = self.competitive_rank()
        rank_image_url = ""
        competitive_play = None
        if rank is not None:
            rank_image_url = q.attr(COMPETITIVE_RANK_ICON, "src", required=False) or ""
            competitive_play = PlayStatAssembler(q, PlayMode.COMPETITIVE_PLAY).assemble()

        quick_play = PlayStatAssembler(q, PlayMode.QUICK_PLAY).assemble()
        achievements = AchievementAssembler(q).assemble()

        return Profile(
            name=name,
            battletag=battletag,
            platform=platform,
            region=region,
            profile_image_url=profile_image_url,
            level=level,
            level_image_url=level_image_url,
            level_star_image_url=level_star_image_url,
            detail=detail,
            competitive_rank=rank,
            competitive_rank_image_url=rank_image_url,
            quick_play=quick_play,
            competitive_play=competitive_play,
            achievements=tuple(achievements),
        )


def parse_profile(
    markup: Union[str, bytes, BeautifulSoup],
    battletag: str,
    platform: str,
    region: str,
    verbose: bool = False,
) -> Profile:
    """
    Extract a Profile from career page markup.

    Args:
        markup: Raw page markup or an already parsed document
        battletag: Battle tag the page was requested for
        platform: Platform value the page was requested for
        region: Region the page was requested for
        verbose: Log the raw markup and per-section counts

    Returns:
        The fully built Profile

    Raises:
        ParseError: If the markup cannot be parsed
        SelectorNotFound: If a required identity field is missing
        CorrelationMismatch: If parallel columns of a section disagree in length
    """
    if verbose and not isinstance(markup, BeautifulSoup):
        logger.debug("Received document (%d chars): %s", len(markup), _preview(markup))

    profile = ProfileAssembler(DocumentQuery(markup)).assemble(battletag, platform, region)

    if verbose:
        logger.debug(
            "Parsed profile %s: level %d, rank %s, %d achievement categories",
            profile.battletag, profile.level, profile.competitive_rank, len(profile.achievements),
        )
    return profile


def _preview(markup: Union[str, bytes], limit: int = 2000) -> str:
    if isinstance(markup, bytes):
        markup = markup.decode("utf-8", errors="replace")
    return markup if len(markup) <= limit else markup[:limit] + "..."
