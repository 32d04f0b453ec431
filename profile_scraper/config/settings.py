"""Pydantic Settings for the profile scraper.

All environment variables use the LINKEDIN_SCRAPER_ prefix.
Example: LINKEDIN_SCRAPER_SESSION_COOKIE_VALUE=AQED..., LINKEDIN_SCRAPER_KEEP_ALIVE=true

Settings are frozen: one instance is built per scraper and handed to every
component that needs it.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class ScraperSettings(BaseSettings):
    """Scraper configuration validated from environment variables."""

    # Session
    session_cookie_value: str = Field(..., min_length=1)  # li_at cookie
    session_cookie_name: str = "li_at"
    session_cookie_domain: str = ".linkedin.com"
    login_url: str = "https://www.linkedin.com/login"
    profile_domain: str = "linkedin.com/"  # Required substring of profile URLs

    # Browser
    keep_alive: bool = False
    headless: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    timeout_ms: int = Field(default=30000, ge=1000)  # Launch + navigation
    content_wait_timeout_ms: int = Field(default=10000, ge=0)
    settle_delay_ms: int = Field(default=2000, ge=0)

    # Lazy-content scrolling
    scroll_distance_px: int = Field(default=300, ge=1)
    scroll_interval_ms: int = Field(default=150, ge=0)
    max_scrolls: int = Field(default=100, ge=1)

    # Pipeline
    timezone: str | None = None  # IANA name; None = local zone
    selectors_path: str | None = None  # None = packaged selectors.yaml

    log_level: str = "INFO"

    model_config = {"env_prefix": "LINKEDIN_SCRAPER_", "frozen": True}
