"""Configuration module: settings and selector strategies."""

from profile_scraper.config.selectors import (
    FieldSelector,
    SectionSelectors,
    SelectorConfig,
    load_selector_config,
)
from profile_scraper.config.settings import ScraperSettings

__all__ = [
    "FieldSelector",
    "ScraperSettings",
    "SectionSelectors",
    "SelectorConfig",
    "load_selector_config",
]
