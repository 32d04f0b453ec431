"""Lookup of list-section extractors.

The pipeline walks ``list_sections()`` in order and extracts each section with
the extractor found there.  The identity block is not a list section and is
handled by ``ProfileExtractor`` directly.
"""

from __future__ import annotations

import logging

from profile_scraper.config.selectors import SelectorConfig
from profile_scraper.extractors.base import SectionExtractor
from profile_scraper.extractors.education import EducationExtractor
from profile_scraper.extractors.experience import ExperienceExtractor
from profile_scraper.extractors.skills import SkillsExtractor
from profile_scraper.extractors.volunteering import VolunteeringExtractor
from profile_scraper.models.raw import Section

logger = logging.getLogger(__name__)

# Output order of the list sections in a scrape result
_SECTION_EXTRACTORS: tuple[type[SectionExtractor], ...] = (
    ExperienceExtractor,
    EducationExtractor,
    VolunteeringExtractor,
    SkillsExtractor,
)


class ExtractorRegistry:
    """One extractor per profile section, kept in page processing order."""

    def __init__(self) -> None:
        self._by_section: dict[Section, SectionExtractor] = {}

    def register(self, extractor: SectionExtractor) -> None:
        """Add *extractor* under its ``section``.

        A section holds exactly one extractor; registering a second one for
        the same section raises ``ValueError``.
        """
        section = extractor.section
        if section in self._by_section:
            raise ValueError(
                f"Extractor for section '{section.value}' is already registered"
            )
        self._by_section[section] = extractor
        logger.debug(
            "Registered %s for section '%s' with %d node strategies",
            type(extractor).__name__,
            section.value,
            len(extractor.strategies),
        )

    def get(self, section: Section) -> SectionExtractor:
        """Return the extractor for *section*; ``KeyError`` when there is none."""
        try:
            return self._by_section[section]
        except KeyError:
            raise KeyError(
                f"No extractor registered for section '{section.value}'"
            ) from None

    def list_sections(self) -> list[Section]:
        return list(self._by_section)


def create_default_registry(config: SelectorConfig) -> ExtractorRegistry:
    """Build the experience, education, volunteering and skills extractors
    from *config*."""
    registry = ExtractorRegistry()
    for extractor_cls in _SECTION_EXTRACTORS:
        registry.register(extractor_cls(config.for_section(extractor_cls.section)))
    return registry
