"""Browser session management and request blocking."""

from profile_scraper.browser.blocking import should_block_request
from profile_scraper.browser.session import BrowserSession

__all__ = ["BrowserSession", "should_block_request"]
