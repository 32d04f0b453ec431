"""Playwright browser session used to load profile pages.

Owns one headless Chromium instance.  Every page gets its own browser
context carrying the session cookie and a route handler that aborts
unwanted requests.  Page loads wait for network idle and then scroll the
page to the bottom so lazily rendered sections are in the DOM before a
snapshot is taken.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

from profile_scraper.browser.blocking import should_block_request
from profile_scraper.config.settings import ScraperSettings
from profile_scraper.errors import BrowserNotInitializedError

if TYPE_CHECKING:
    from playwright.async_api import Page, Route

logger = logging.getLogger(__name__)

# Chromium flags for containerized / headless operation
CHROMIUM_ARGS: list[str] = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
]

VIEWPORT = {"width": 1920, "height": 1080}

# Scrolls one step and reports whether the bottom of the page was reached
_SCROLL_STEP_JS = """
(distance) => {
    window.scrollBy(0, distance);
    return window.scrollY + window.innerHeight >= document.body.scrollHeight;
}
"""


class BrowserSession:
    """A logged-in Chromium session.

    Lifecycle
    ---------
    1. ``start()``: launch Playwright and Chromium.
    2. ``new_page()`` / ``load()`` / ``snapshot()`` / ``close_page()`` per profile.
    3. ``close()``: close the browser and stop Playwright.
    """

    def __init__(self, settings: ScraperSettings) -> None:
        self._settings = settings
        self._playwright: Any = None  # Playwright instance (lazy import)
        self._browser: Any = None

    @property
    def is_started(self) -> bool:
        return self._browser is not None

    async def start(self) -> None:
        """Launch Chromium."""
        from playwright.async_api import async_playwright

        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(
            headless=self._settings.headless,
            args=CHROMIUM_ARGS,
            timeout=self._settings.timeout_ms,
        )
        logger.info("Browser launched (headless=%s)", self._settings.headless)

    async def new_page(self) -> "Page":
        """Open a page in a fresh context with the session cookie set."""
        if self._browser is None:
            raise BrowserNotInitializedError()

        context = await self._browser.new_context(
            user_agent=self._settings.user_agent,
            viewport=VIEWPORT,
        )
        await context.add_cookies([
            {
                "name": self._settings.session_cookie_name,
                "value": self._settings.session_cookie_value,
                "domain": self._settings.session_cookie_domain,
                "path": "/",
            }
        ])
        page = await context.new_page()
        await page.route("**/*", self._handle_route)
        return page

    async def is_logged_in(self) -> bool:
        """Visit the login page; a logged-in session gets redirected away."""
        page = await self.new_page()
        try:
            await page.goto(
                self._settings.login_url,
                wait_until="networkidle",
                timeout=self._settings.timeout_ms,
            )
            path = urlparse(page.url).path.rstrip("/")
            return not path.endswith("/login")
        finally:
            await self.close_page(page)

    async def load(self, page: "Page", url: str) -> None:
        """Navigate to *url* and materialize all lazily loaded content."""
        from playwright.async_api import TimeoutError as PlaywrightTimeoutError

        await page.goto(
            url, wait_until="networkidle", timeout=self._settings.timeout_ms
        )

        try:
            await page.wait_for_selector(
                "main", timeout=self._settings.content_wait_timeout_ms
            )
        except PlaywrightTimeoutError:
            logger.warning(
                "Selector 'main' not found within %dms on %s",
                self._settings.content_wait_timeout_ms,
                page.url,
            )

        await self.auto_scroll(page)
        await page.wait_for_timeout(self._settings.settle_delay_ms)

    async def auto_scroll(self, page: "Page") -> None:
        """Scroll down step by step until the bottom (or the scroll cap)."""
        for _ in range(self._settings.max_scrolls):
            at_bottom = await page.evaluate(
                _SCROLL_STEP_JS, self._settings.scroll_distance_px
            )
            if at_bottom:
                break
            await asyncio.sleep(self._settings.scroll_interval_ms / 1000)

    async def snapshot(self, page: "Page") -> str:
        """Serialize the current document."""
        return await page.content()

    async def close_page(self, page: "Page") -> None:
        """Close *page* together with its context."""
        try:
            await page.context.close()
        except Exception:
            logger.debug("Error closing page (may already be closed)", exc_info=True)

    async def close(self) -> None:
        """Close the browser and stop Playwright.  Safe to call twice."""
        if self._browser is not None:
            try:
                await self._browser.close()
            except Exception:
                logger.debug("Error closing browser (may already be closed)", exc_info=True)
            self._browser = None
            logger.info("Browser closed")

        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None

    @staticmethod
    async def _handle_route(route: "Route") -> None:
        request = route.request
        if should_block_request(request.resource_type, request.url):
            await route.abort()
        else:
            await route.continue_()
