"""Pipeline and scraper services."""

from profile_scraper.services.pipeline import ProfilePipeline
from profile_scraper.services.scraper import ProfileScraper

__all__ = ["ProfilePipeline", "ProfileScraper"]
