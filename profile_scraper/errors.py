"""Error hierarchy for the profile scraper.

Only invocation-level failures are raised: a dead session or a violated
precondition makes the whole scrape meaningless, so callers get a distinct
exception (and ``code``) per condition and can branch on it.  Field- and
record-level problems never surface here; they end up as ``None`` values or
skipped nodes.
"""

from __future__ import annotations


class ScraperError(Exception):
    """Base error for all scraper-specific errors."""

    code: str = "scraper_error"
    message: str = "Scraper error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class SessionExpiredError(ScraperError):
    """The session cookie no longer authenticates us."""

    code = "session_expired"
    message = (
        "Not logged in: the session seems to be expired. Log in again with a "
        "browser and extract a fresh session cookie value."
    )


class BrowserNotInitializedError(ScraperError):
    """``run`` was called before ``setup``."""

    code = "browser_not_initialized"
    message = "Browser is not set. Please run the setup method first."


class MissingProfileUrlError(ScraperError):
    """No profile URL given."""

    code = "missing_profile_url"
    message = "No profile URL given."


class InvalidProfileUrlError(ScraperError):
    """The profile URL does not point at the expected site."""

    code = "invalid_profile_url"
    message = "The given URL to scrape is not a linkedin.com URL."
