"""Extraction + normalization pipeline for one page snapshot.

Parses the HTML once, runs the identity extractor and every registered
section extractor against it, normalizes the raw records and aggregates
them into a ``ScrapeResult``.  Synchronous and stateless per call: it runs
to completion on whatever snapshot it is given.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from profile_scraper.config.selectors import SelectorConfig, load_selector_config
from profile_scraper.config.settings import ScraperSettings
from profile_scraper.dates import reference_timezone
from profile_scraper.extractors.profile import ProfileExtractor
from profile_scraper.extractors.registry import ExtractorRegistry, create_default_registry
from profile_scraper.geo.location import LocationResolver
from profile_scraper.models.normalizer import RecordNormalizer
from profile_scraper.models.raw import Section
from profile_scraper.models.schemas import ScrapeResult

logger = logging.getLogger(__name__)

# ScrapeResult attribute filled by each list section
_RESULT_FIELDS: dict[Section, str] = {
    Section.EXPERIENCE: "experiences",
    Section.EDUCATION: "education",
    Section.VOLUNTEERING: "volunteer_experiences",
    Section.SKILLS: "skills",
}


class ProfilePipeline:
    """Turns a profile page snapshot into a ``ScrapeResult``.

    Dependencies are injected via the constructor so the pipeline is
    testable with literal HTML and custom gazetteers.
    """

    def __init__(
        self,
        *,
        selectors: SelectorConfig,
        normalizer: RecordNormalizer,
        registry: ExtractorRegistry | None = None,
    ) -> None:
        self._normalizer = normalizer
        self._profile_extractor = ProfileExtractor(
            selectors.for_section(Section.IDENTITY)
        )
        self._registry = registry or create_default_registry(selectors)

    @classmethod
    def from_settings(cls, settings: ScraperSettings) -> "ProfilePipeline":
        """Build the pipeline from settings: selectors, timezone, gazetteer."""
        normalizer = RecordNormalizer(
            location_resolver=LocationResolver(),
            tzinfo=reference_timezone(settings.timezone),
        )
        return cls(
            selectors=load_selector_config(settings.selectors_path),
            normalizer=normalizer,
        )

    def run(
        self,
        html: str,
        url: str,
        *,
        scraper_session_id: str | None = None,
    ) -> ScrapeResult:
        """Extract and normalize every section of the page in *html*."""
        soup = BeautifulSoup(html, "html.parser")

        raw_profile = self._profile_extractor.extract_raw(soup, url)
        result: dict = {"profile": self._normalizer.normalize(raw_profile)}

        for section in self._registry.list_sections():
            extraction = self._registry.get(section).extract(soup)
            records = [self._normalizer.normalize(raw) for raw in extraction.records]
            result[_RESULT_FIELDS[section]] = records

            logger.info(
                "Parsed %s data",
                section.value,
                extra={
                    "scraper_session_id": scraper_session_id,
                    "section": section.value,
                    "records_extracted": len(records),
                    "records_skipped": len(extraction.skipped),
                },
            )

        return ScrapeResult(**result)
