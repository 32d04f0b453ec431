"""Shared test fixtures for the scraper test suite."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from dateutil import tz

from profile_scraper.config.selectors import SelectorConfig, load_selector_config
from profile_scraper.config.settings import ScraperSettings
from profile_scraper.geo.gazetteer import Gazetteer
from profile_scraper.geo.location import LocationResolver
from profile_scraper.models.normalizer import RecordNormalizer
from profile_scraper.services.pipeline import ProfilePipeline

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Small deterministic reference lists; the real datasets are covered separately
TEST_COUNTRIES = ["Netherlands", "Germany", "United Kingdom", "Canada", "Georgia"]
TEST_CITIES = ["Amsterdam", "Sacramento", "Berlin", "London", "Toronto", "Utrecht"]


# ---------------------------------------------------------------------------
# Ensure required env vars are set for ScraperSettings in tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _set_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set minimal env vars so ScraperSettings can be instantiated in tests."""
    if "LINKEDIN_SCRAPER_SESSION_COOKIE_VALUE" not in os.environ:
        monkeypatch.setenv("LINKEDIN_SCRAPER_SESSION_COOKIE_VALUE", "test-cookie")


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> ScraperSettings:
    """Test settings with safe defaults."""
    return ScraperSettings(
        session_cookie_value="test-cookie",
        timezone="UTC",
        settle_delay_ms=0,
        scroll_interval_ms=0,
        max_scrolls=3,
    )


# ---------------------------------------------------------------------------
# Component fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def gazetteer() -> Gazetteer:
    return Gazetteer(TEST_COUNTRIES, TEST_CITIES)


@pytest.fixture
def resolver(gazetteer: Gazetteer) -> LocationResolver:
    return LocationResolver(gazetteer)


@pytest.fixture
def normalizer(resolver: LocationResolver) -> RecordNormalizer:
    return RecordNormalizer(location_resolver=resolver, tzinfo=tz.UTC)


@pytest.fixture
def selector_config() -> SelectorConfig:
    return load_selector_config()


@pytest.fixture
def pipeline(selector_config: SelectorConfig, normalizer: RecordNormalizer) -> ProfilePipeline:
    return ProfilePipeline(selectors=selector_config, normalizer=normalizer)


@pytest.fixture
def profile_page_html() -> str:
    return (FIXTURES_DIR / "profile_page.html").read_text(encoding="utf-8")
