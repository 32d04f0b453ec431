"""Profile scraper: orchestrates one scrape run per profile URL.

Coordinates the lifecycle of a scrape through the pipeline:
precondition checks → new page → navigate + scroll → snapshot →
extract + normalize → close page (or the whole browser unless keep-alive).

Preconditions are checked before any navigation and each failure raises its
own error type.  Any error during a run closes the browser and propagates.
"""

from __future__ import annotations

import logging
import time
from uuid import uuid4

from profile_scraper.browser.session import BrowserSession
from profile_scraper.config.settings import ScraperSettings
from profile_scraper.errors import (
    BrowserNotInitializedError,
    InvalidProfileUrlError,
    MissingProfileUrlError,
    SessionExpiredError,
)
from profile_scraper.models.schemas import ScrapeResult
from profile_scraper.services.pipeline import ProfilePipeline

logger = logging.getLogger(__name__)


class ProfileScraper:
    """Scrapes profile pages with an authenticated browser session.

    Dependencies are injected via the constructor so the scraper is
    testable without a real browser.
    """

    def __init__(
        self,
        settings: ScraperSettings,
        *,
        session: BrowserSession | None = None,
        pipeline: ProfilePipeline | None = None,
    ) -> None:
        self._settings = settings
        self._session = session or BrowserSession(settings)
        self._pipeline = pipeline or ProfilePipeline.from_settings(settings)
        logger.info(
            "Using options: keep_alive=%s headless=%s timeout_ms=%d",
            settings.keep_alive,
            settings.headless,
            settings.timeout_ms,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def setup(self) -> None:
        """Launch the browser and make sure the session is still valid."""
        try:
            await self._session.start()
            await self.check_if_logged_in()
        except Exception:
            logger.error("An error occurred during setup")
            await self.close()
            raise

    async def check_if_logged_in(self) -> None:
        """Raise ``SessionExpiredError`` when the session cookie is dead."""
        logger.info("Checking if we are still logged in")
        if not await self._session.is_logged_in():
            error = SessionExpiredError()
            logger.error(error.message, extra={"error_reason": error.code})
            raise error
        logger.info("Session is valid")

    async def run(self, profile_url: str) -> ScrapeResult:
        """Scrape *profile_url* and return everything found on the page."""
        if not self._session.is_started:
            raise BrowserNotInitializedError()
        if not profile_url:
            raise MissingProfileUrlError()
        if self._settings.profile_domain not in profile_url:
            raise InvalidProfileUrlError(profile_url=profile_url)

        scraper_session_id = str(uuid4())
        log_extra = {"scraper_session_id": scraper_session_id, "profile_url": profile_url}
        started = time.monotonic()

        try:
            page = await self._session.new_page()
            logger.info("Navigating to profile", extra=log_extra)
            await self._session.load(page, profile_url)

            html = await self._session.snapshot(page)
            result = self._pipeline.run(
                html, page.url, scraper_session_id=scraper_session_id
            )
        except Exception as exc:
            logger.error(
                "An error occurred during a run",
                extra={**log_extra, "error_reason": str(exc)},
            )
            await self.close()
            raise

        if self._settings.keep_alive:
            await self._session.close_page(page)
        else:
            await self.close()

        duration_ms = round((time.monotonic() - started) * 1000, 1)
        logger.info(
            "Returned profile details",
            extra={**log_extra, "duration_ms": duration_ms},
        )
        return result

    async def close(self) -> None:
        await self._session.close()
