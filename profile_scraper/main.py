"""Command-line entry point.

Usage: ``profile-scraper <profile-url> [<profile-url> ...]``

Reads settings from ``LINKEDIN_SCRAPER_*`` environment variables, scrapes
every URL on one browser session and prints each result as JSON.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from pydantic import ValidationError

from profile_scraper.config.settings import ScraperSettings
from profile_scraper.errors import ScraperError
from profile_scraper.logging_config import configure_logging
from profile_scraper.models.schemas import ScrapeResult
from profile_scraper.services.scraper import ProfileScraper

logger = logging.getLogger(__name__)


async def scrape_profiles(
    urls: list[str], settings: ScraperSettings | None = None
) -> list[ScrapeResult]:
    """Scrape *urls* one after another, keeping the browser open in between."""
    settings = settings or ScraperSettings()  # type: ignore[call-arg]
    scraper = ProfileScraper(settings.model_copy(update={"keep_alive": True}))

    await scraper.setup()
    results: list[ScrapeResult] = []
    try:
        for url in urls:
            results.append(await scraper.run(url))
    finally:
        await scraper.close()
    return results


def main(argv: list[str] | None = None) -> int:
    urls = sys.argv[1:] if argv is None else argv
    if not urls:
        print("usage: profile-scraper <profile-url> [<profile-url> ...]", file=sys.stderr)
        return 2

    try:
        settings = ScraperSettings()  # type: ignore[call-arg]
    except ValidationError as exc:
        configure_logging()
        # Field names only: input values may hold the session cookie
        fields = ", ".join(".".join(map(str, err["loc"])) for err in exc.errors())
        logger.error("Invalid settings: %s", fields, extra={"error_reason": "invalid_settings"})
        return 1
    configure_logging(settings.log_level)

    try:
        results = asyncio.run(scrape_profiles(urls, settings))
    except ScraperError as exc:
        logger.error("Scrape failed: %s", exc.message, extra={"error_reason": exc.code})
        return 1

    for result in results:
        print(result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
