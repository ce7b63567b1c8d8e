# owstat/scraper/core.py
from __future__ import annotations

import logging
from typing import Optional, Union

from owstat.config import DEFAULT_LOCALE, DEFAULT_PLATFORM, DEFAULT_REGION, Platform, ScraperConfig
from owstat.fetcher import battletag_for, fetch_html, parse_battletag, profile_url
from owstat.models import Profile
from .profile import parse_profile

logger = logging.getLogger(__name__)


class OverwatchScraper:
    """Fetches a player's career page and extracts it into a Profile."""

    def __init__(self, config: Optional[ScraperConfig] = None):
        self.config = config or ScraperConfig()

    def fetch_html(self, url: str) -> bytes:
        return fetch_html(url, timeout_seconds=self.config.timeout_seconds, user_agent=self.config.user_agent)

    def fetch_profile(
        self,
        battletag: str,
        platform: Union[str, Platform] = DEFAULT_PLATFORM,
        region: str = DEFAULT_REGION,
        locale: str = DEFAULT_LOCALE,
    ) -> Profile:
        """
        Fetch and extract one player's profile.

        Args:
            battletag: ``name#1234`` on PC, the bare handle on consoles
            platform: One of Platform's values
            region: Region segment of the PC career URL
            locale: Language segment of the URL, e.g. ``en-us``

        Raises:
            ValueError: If the battle tag is malformed or the platform is unknown
            FetchError: If the page cannot be downloaded
            ParseError, SelectorNotFound, CorrelationMismatch: If extraction fails
        """
        platform = Platform.parse(platform)
        handle, discriminator = parse_battletag(battletag)
        url = profile_url(handle, discriminator, platform, region, locale, base_url=self.config.base_url)
        display_tag = battletag_for(handle, discriminator, platform)

        markup = self.fetch_html(url)
        profile = parse_profile(
            markup,
            battletag=display_tag,
            platform=platform.value,
            region=region,
            verbose=self.config.verbose,
        )
        logger.info("Extracted profile for %s (%s/%s)", display_tag, platform.value, region)
        return profile
