"""Profile page extraction and normalization for LinkedIn profiles."""

from profile_scraper.config.settings import ScraperSettings
from profile_scraper.errors import (
    BrowserNotInitializedError,
    InvalidProfileUrlError,
    MissingProfileUrlError,
    ScraperError,
    SessionExpiredError,
)
from profile_scraper.models.schemas import ScrapeResult
from profile_scraper.services.pipeline import ProfilePipeline
from profile_scraper.services.scraper import ProfileScraper

__all__ = [
    "BrowserNotInitializedError",
    "InvalidProfileUrlError",
    "MissingProfileUrlError",
    "ProfilePipeline",
    "ProfileScraper",
    "ScrapeResult",
    "ScraperError",
    "ScraperSettings",
    "SessionExpiredError",
]
