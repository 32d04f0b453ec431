"""Request blocking rules for profile page loads.

Heavy resource types are never needed for text extraction, and a handful of
third-party tracker hosts only slow the page down.
"""

from __future__ import annotations

from urllib.parse import urlparse

BLOCKED_RESOURCE_TYPES = frozenset({
    "image",
    "media",
    "font",
    "texttrack",
    "object",
    "beacon",
    "csp_report",
    "imageset",
})

# Resource types that are only blocked when they come from BLOCKED_HOSTS
HOST_BLOCKED_RESOURCE_TYPES = frozenset({"script", "xhr", "fetch", "document"})

BLOCKED_HOSTS = frozenset({
    "static.chartbeat.com",
    "scdn.cxense.com",
    "api.cxense.com",
    "www.googletagmanager.com",
    "connect.facebook.net",
    "platform.twitter.com",
    "tags.tiqcdn.com",
    "dev.visualwebsiteoptimizer.com",
    "smartlock.google.com",
    "cdn.embedly.com",
})


def get_hostname(url: str) -> str | None:
    """Return the hostname of *url*, or ``None`` for malformed URLs."""
    try:
        return urlparse(url).hostname
    except ValueError:
        return None


def should_block_request(resource_type: str, url: str) -> bool:
    """Decide whether a request should be aborted."""
    if resource_type in BLOCKED_RESOURCE_TYPES:
        return True

    if resource_type in HOST_BLOCKED_RESOURCE_TYPES:
        return get_hostname(url) in BLOCKED_HOSTS

    return False
