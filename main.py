# main.py
"""
Command line entry point.

Usage:
    python main.py --battletag "meinside#3155" --region kr
    python main.py --battletag "meinside#3155" --html --out stat.html
    python main.py --battletag meinside --platform psn --banner banner.png --quiet
"""

import argparse
import logging
import sys
from pathlib import Path

from owstat.banner import save_banner
from owstat.config import DEFAULT_LOCALE, DEFAULT_PLATFORM, DEFAULT_REGION, Platform, ScraperConfig
from owstat.errors import EncodeError, FetchError, OwstatError
from owstat.renderer import render_html
from owstat.scraper import OverwatchScraper

logger = logging.getLogger(__name__)


def _safe_print(message: str) -> None:
    """Print with a replacement fallback for restricted terminal encodings."""
    try:
        print(message)
    except UnicodeEncodeError:
        encoding = sys.stdout.encoding or "ascii"
        print(message.encode(encoding, errors="replace").decode(encoding))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fetch an Overwatch career profile as JSON, HTML or a PNG banner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --battletag "meinside#3155" --region kr
  python main.py --battletag "meinside#3155" --html --out stat.html
  python main.py --battletag meinside --platform psn --banner banner.png
        """
    )
    parser.add_argument('--battletag', required=True, help='Battle tag, eg. "meinside#3155"')
    parser.add_argument(
        '--platform',
        default=DEFAULT_PLATFORM.value,
        choices=[p.value for p in Platform],
        help=f'Platform (default: {DEFAULT_PLATFORM.value})',
    )
    parser.add_argument('--region', default=DEFAULT_REGION, help=f'Region, eg. "us", "kr", "eu" (default: {DEFAULT_REGION})')
    parser.add_argument('--language', default=DEFAULT_LOCALE, help=f'Language, eg. "en-us", "ko-kr" (default: {DEFAULT_LOCALE})')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging for debugging')
    parser.add_argument('--html', action='store_true', help='Print HTML, not JSON')
    parser.add_argument('--out', help='Save the result to a file')
    parser.add_argument('--banner', help='Create a banner file in .png format')
    parser.add_argument('--quiet', action='store_true', help='No output on stdout')
    return parser


def main(argv=None, scraper=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ScraperConfig.from_env()
    except ValueError as e:
        _safe_print(f"* Configuration error: {e}")
        return 2
    config.verbose = config.verbose or args.verbose

    if scraper is None:
        scraper = OverwatchScraper(config)

    try:
        profile = scraper.fetch_profile(args.battletag, args.platform, args.region, args.language)
    except ValueError as e:
        _safe_print(f"* Malformed battle tag: {args.battletag} ({e})")
        return 2
    except FetchError as e:
        _safe_print(f"* Fetch error: {e}")
        return 1
    except OwstatError as e:
        _safe_print(f"* Parse error: {e}")
        return 1

    status = 0
    try:
        output = render_html(profile) if args.html else profile.to_json(indent=2)
    except EncodeError as e:
        _safe_print(f"* {e}")
        output = None
        status = 1

    if output is not None:
        if args.out:
            try:
                Path(args.out).write_text(output, encoding="utf-8")
                logger.info("Saved %s", args.out)
            except OSError as e:
                _safe_print(f"* Failed to save {args.out}: {e}")
                status = 1
        elif not args.quiet:
            _safe_print(output)

    if args.banner:
        try:
            save_banner(profile, args.banner, timeout_seconds=config.timeout_seconds)
        except OwstatError as e:
            _safe_print(f"* Failed to create a banner file: {e}")
            status = 1

    return status


if __name__ == "__main__":
    raise SystemExit(main())
