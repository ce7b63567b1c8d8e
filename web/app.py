from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse, Response
import asyncio
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from owstat.banner import banner_png_bytes
from owstat.config import Platform, ScraperConfig
from owstat.errors import EncodeError, FetchError, OwstatError
from owstat.models import Profile
from owstat.renderer import render_html
from owstat.scraper import OverwatchScraper

logger = logging.getLogger(__name__)

app = FastAPI(title="owstat")
scraper = OverwatchScraper(ScraperConfig.from_env())

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, max-age=0",
    "Pragma": "no-cache",
    "Expires": "0",
}


def _battletag_from_path(value: str, platform: Platform = Platform.PC) -> str:
    """
    URL form ``name-1234`` back to ``name#1234`` on PC.

    Console handles have no discriminator and pass through unchanged.
    """
    text = str(value or "").strip()
    if platform is not Platform.PC:
        return text
    handle, sep, number = text.rpartition("-")
    if sep and handle and number.isdigit():
        return f"{handle}#{number}"
    return text


async def _load_profile(platform: str, region: str, battletag: str) -> Profile:
    try:
        platform_value = Platform.parse(platform)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    tag = _battletag_from_path(battletag, platform_value)
    try:
        return await asyncio.to_thread(scraper.fetch_profile, tag, platform_value, region)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Malformed battle tag '{tag}': {e}")
    except FetchError as e:
        raise HTTPException(status_code=502, detail=f"Failed to fetch profile: {e}")
    except OwstatError as e:
        logger.warning("Extraction failed for %s (%s/%s): %s", tag, platform, region, e)
        raise HTTPException(status_code=502, detail=f"Failed to extract profile: {e}")


@app.get("/api/profile/{platform}/{region}/{battletag}")
async def profile_json(platform: str, region: str, battletag: str) -> dict:
    profile = await _load_profile(platform, region, battletag)
    return profile.to_dict()


@app.get("/profile/{platform}/{region}/{battletag}")
async def profile_html(platform: str, region: str, battletag: str) -> HTMLResponse:
    profile = await _load_profile(platform, region, battletag)
    try:
        content = render_html(profile)
    except EncodeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return HTMLResponse(content=content, headers=NO_CACHE_HEADERS)


@app.get("/banner/{platform}/{region}/{battletag}.png")
async def profile_banner(platform: str, region: str, battletag: str) -> Response:
    profile = await _load_profile(platform, region, battletag)
    try:
        data = await asyncio.to_thread(
            banner_png_bytes, profile, timeout_seconds=scraper.config.timeout_seconds
        )
    except FetchError as e:
        raise HTTPException(status_code=502, detail=f"Failed to load banner resources: {e}")
    except EncodeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return Response(content=data, media_type="image/png", headers=NO_CACHE_HEADERS)


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="127.0.0.1", port=5000)
