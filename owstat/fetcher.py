# owstat/fetcher.py
"""
Locating and downloading career pages.

ex: https://playoverwatch.com/en-us/career/pc/kr/meinside-3155
"""

from __future__ import annotations

import logging
import socket
from typing import Optional, Tuple, Union
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from owstat.config import (
    BASE_URL,
    DEFAULT_LOCALE,
    DEFAULT_PLATFORM,
    DEFAULT_REGION,
    DEFAULT_TIMEOUT_SECONDS,
    USER_AGENT,
    Platform,
)
from owstat.errors import FetchError

logger = logging.getLogger(__name__)


def parse_battletag(battletag: str) -> Tuple[str, Optional[int]]:
    """
    Split ``"name#1234"`` into its handle and discriminator.

    A bare handle yields a None discriminator.

    Raises:
        ValueError: If the tag is empty or the discriminator is not numeric
    """
    text = (battletag or "").strip()
    if not text:
        raise ValueError("Battle tag is empty")
    if "#" not in text:
        return text, None

    parts = text.split("#")
    if len(parts) != 2 or not parts[0]:
        raise ValueError(f"Malformed battle tag: {battletag}")
    try:
        return parts[0], int(parts[1])
    except ValueError:
        raise ValueError(f"Malformed battle tag: {battletag} (discriminator must be a number)")


def battletag_for(handle: str, discriminator: Optional[int], platform: Union[str, Platform]) -> str:
    """Display battle tag: ``handle#discriminator`` on PC, the bare handle elsewhere."""
    if Platform.parse(platform) is DEFAULT_PLATFORM:
        if discriminator is None:
            raise ValueError(f"A discriminator is required on platform '{DEFAULT_PLATFORM.value}'")
        return f"{handle}#{discriminator}"
    return handle


def profile_url(
    handle: str,
    discriminator: Optional[int],
    platform: Union[str, Platform] = DEFAULT_PLATFORM,
    region: str = DEFAULT_REGION,
    locale: str = DEFAULT_LOCALE,
    base_url: str = BASE_URL,
) -> str:
    """Career page URL for a player; region and discriminator are PC-only."""
    platform = Platform.parse(platform)
    base = base_url.rstrip("/")
    if platform is DEFAULT_PLATFORM:
        if discriminator is None:
            raise ValueError(f"A discriminator is required on platform '{DEFAULT_PLATFORM.value}'")
        return (
            f"{base}/{locale}/career/{platform.value}/{region}/"
            f"{quote(handle)}-{discriminator}"
        )
    return f"{base}/{locale}/career/{platform.value}/{quote(handle)}"


def fetch_html(
    url: str,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    user_agent: str = USER_AGENT,
) -> bytes:
    """GET a career page and return its raw markup."""
    logger.info("Fetching %s", url)
    return fetch_bytes(url, timeout_seconds=timeout_seconds, user_agent=user_agent)


def fetch_bytes(
    url: str,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    user_agent: str = USER_AGENT,
) -> bytes:
    """
    GET a URL and return its body.

    Raises:
        FetchError: On HTTP errors, non-200 responses, network failures or timeouts
    """
    req = Request(url, headers={"User-Agent": user_agent}, method="GET")
    try:
        with urlopen(req, timeout=timeout_seconds) as resp:
            status = getattr(resp, "status", 200)
            if status != 200:
                raise FetchError(f"HTTP {status} on GET request for: {url}")
            return resp.read()
    except HTTPError as exc:
        raise FetchError(f"HTTP {exc.code} on GET request for: {url}") from exc
    except URLError as exc:
        raise FetchError(f"Failed to reach {url}: {exc.reason}") from exc
    except (socket.timeout, TimeoutError) as exc:
        raise FetchError(f"Timed out after {timeout_seconds}s fetching {url}") from exc
