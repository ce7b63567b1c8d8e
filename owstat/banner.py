# owstat/banner.py
"""
320x50 PNG banner for an extracted profile.

Layers, left to right: Overwatch logo, battle tag / platform / region and the
detail line, competitive rank badge (when ranked), level badge with optional
star overlay, and the player portrait.

The logo, the font and every image download are injectable so banners can be
composed without network access; by default they are fetched from
OVERWATCH_LOGO_URL, KOVERWATCH_FONT_URL and the URLs stored on the profile.
"""

from __future__ import annotations

import logging
from functools import partial
from io import BytesIO
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from owstat.config import DEFAULT_TIMEOUT_SECONDS
from owstat.errors import EncodeError, FetchError
from owstat.fetcher import fetch_bytes
from owstat.models import Profile

logger = logging.getLogger(__name__)

OVERWATCH_LOGO_URL = "https://github.com/meinside/overwatch-go/raw/master/overwatch_logo.png"
KOVERWATCH_FONT_URL = "http://kr.battle.net/forums/static/fonts/koverwatch/koverwatch.ttf"

# Positions and sizes on the banner
BANNER_WIDTH = 320
BANNER_HEIGHT = 50
MARGIN = 4
RANK_ICON_SIZE = 35
LEVEL_BG_SIZE = BANNER_HEIGHT
BACKGROUND_COLOR = (64, 82, 117, 255)  # #405275
TEXT_COLOR = (255, 255, 255, 255)

FONT_SIZE_BATTLETAG = 17.0
FONT_SIZE_DETAIL = 13.0
FONT_SIZE_LEVEL = 11.0
FONT_SIZE_RANK = 11.0

ImageLoader = Callable[[str], Image.Image]
FontFactory = Callable[[float], ImageFont.ImageFont]


def fetch_image(url: str, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> Image.Image:
    """Download and decode an image."""
    data = fetch_bytes(url, timeout_seconds=timeout_seconds)
    try:
        image = Image.open(BytesIO(data))
        image.load()
        return image
    except Exception as e:
        raise FetchError(f"Failed to decode image from {url}: {e}") from e


def truetype_font_factory(data: bytes) -> FontFactory:
    """Font factory over in-memory TrueType data; one font object per size."""
    cache: Dict[float, ImageFont.FreeTypeFont] = {}

    def factory(size: float) -> ImageFont.FreeTypeFont:
        if size not in cache:
            cache[size] = ImageFont.truetype(BytesIO(data), size=size)
        return cache[size]

    return factory


def remote_font_factory(
    url: str = KOVERWATCH_FONT_URL, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
) -> FontFactory:
    logger.info("Loading banner font from %s", url)
    return truetype_font_factory(fetch_bytes(url, timeout_seconds=timeout_seconds))


def _fit(image: Image.Image, size: Tuple[int, int]) -> Image.Image:
    return image.convert("RGBA").resize(size, Image.Resampling.LANCZOS)


def _draw_text(draw: ImageDraw.ImageDraw, x: int, baseline: int, text: str, font) -> None:
    # Positions are baselines; Pillow draws from the top of the ascent
    try:
        ascent = font.getmetrics()[0]
    except AttributeError:
        ascent = font.getbbox(text)[3]
    draw.text((x, baseline - ascent), text, font=font, fill=TEXT_COLOR)


def compose_banner(
    profile: Profile,
    logo: Optional[Image.Image] = None,
    font: Optional[FontFactory] = None,
    image_loader: Optional[ImageLoader] = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> Image.Image:
    """
    Compose the banner image.

    Args:
        profile: Extracted profile
        logo: Logo image; downloaded from OVERWATCH_LOGO_URL when omitted
        font: Callable returning a font for a point size; downloads
              KOVERWATCH_FONT_URL when omitted
        image_loader: Callable loading an image from a URL (portrait, badges)
        timeout_seconds: Download timeout for the default logo, font and images

    Returns:
        RGBA image of BANNER_WIDTH x BANNER_HEIGHT

    Raises:
        FetchError: If a resource cannot be downloaded or decoded
    """
    load = image_loader or partial(fetch_image, timeout_seconds=timeout_seconds)
    banner = Image.new("RGBA", (BANNER_WIDTH, BANNER_HEIGHT), BACKGROUND_COLOR)

    if logo is None:
        logo = load(OVERWATCH_LOGO_URL)
    logo = _fit(logo, (BANNER_HEIGHT, BANNER_HEIGHT))
    banner.paste(logo, (0, 0), logo)

    portrait = _fit(load(profile.profile_image_url), (BANNER_HEIGHT, BANNER_HEIGHT))
    banner.paste(portrait, (BANNER_WIDTH - BANNER_HEIGHT, 0), portrait)

    if font is None:
        font = remote_font_factory(timeout_seconds=timeout_seconds)

    draw = ImageDraw.Draw(banner)

    _draw_text(
        draw, BANNER_HEIGHT + MARGIN, int(FONT_SIZE_BATTLETAG),
        f"{profile.battletag}  {profile.platform}/{profile.region}",
        font(FONT_SIZE_BATTLETAG),
    )
    _draw_text(
        draw, BANNER_HEIGHT + MARGIN, int(BANNER_HEIGHT * 0.88),
        profile.detail,
        font(FONT_SIZE_DETAIL),
    )

    # Stars push the level badge up to make room underneath
    level_bg_y = 0
    level_text_y = int(BANNER_HEIGHT * 0.58)
    level_x = BANNER_WIDTH - BANNER_HEIGHT * 2
    if profile.level_star_image_url:
        level_bg_y = -int(BANNER_HEIGHT * 0.1)
        level_text_y = int(BANNER_HEIGHT * 0.48)
        stars = _fit(load(profile.level_star_image_url), (LEVEL_BG_SIZE, LEVEL_BG_SIZE // 2))
        banner.paste(stars, (level_x, LEVEL_BG_SIZE // 2), stars)

    level_bg = _fit(load(profile.level_image_url), (LEVEL_BG_SIZE, LEVEL_BG_SIZE))
    banner.paste(level_bg, (level_x, level_bg_y), level_bg)
    _draw_text(
        draw, int(BANNER_WIDTH - BANNER_HEIGHT * 1.64), level_text_y,
        f"{profile.level:3d}",
        font(FONT_SIZE_LEVEL),
    )

    if profile.has_competitive_rank:
        if profile.competitive_rank_image_url:
            icon = _fit(load(profile.competitive_rank_image_url), (RANK_ICON_SIZE, RANK_ICON_SIZE))
            banner.paste(icon, (level_x - RANK_ICON_SIZE, 0), icon)
        _draw_text(
            draw, int(BANNER_WIDTH - BANNER_HEIGHT * 2.52), int(BANNER_HEIGHT * 0.86),
            f"{profile.competitive_rank:4d}",
            font(FONT_SIZE_RANK),
        )

    return banner


def banner_png_bytes(
    profile: Profile,
    logo: Optional[Image.Image] = None,
    font: Optional[FontFactory] = None,
    image_loader: Optional[ImageLoader] = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> bytes:
    """Compose the banner and encode it as PNG."""
    image = compose_banner(
        profile, logo=logo, font=font, image_loader=image_loader, timeout_seconds=timeout_seconds
    )
    buffer = BytesIO()
    try:
        image.save(buffer, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeError(f"PNG encode error: {e}") from e
    return buffer.getvalue()


def save_banner(
    profile: Profile,
    path: Union[str, Path],
    logo: Optional[Image.Image] = None,
    font: Optional[FontFactory] = None,
    image_loader: Optional[ImageLoader] = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> None:
    data = banner_png_bytes(
        profile, logo=logo, font=font, image_loader=image_loader, timeout_seconds=timeout_seconds
    )
    try:
        Path(path).write_bytes(data)
    except OSError as e:
        raise EncodeError(f"Failed to save banner to {path}: {e}") from e
