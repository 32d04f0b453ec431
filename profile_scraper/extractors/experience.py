"""Work experience section extractor."""

from __future__ import annotations

from bs4 import Tag

from profile_scraper.extractors.base import SectionExtractor, split_date_range
from profile_scraper.models.raw import RawExperience, Section


class ExperienceExtractor(SectionExtractor):
    """Extractor for the experience section."""

    section = Section.EXPERIENCE
    identity_fields = ("title", "company")

    def extract_node(self, node: Tag) -> RawExperience:
        # The company line reads "Acme Corp · Full-time" on current layouts
        company_line = self.field(node, "company") or ""
        company, _, suffix = company_line.partition("·")

        start_date, end_date, end_date_is_present = split_date_range(
            self.field(node, "date_range")
        )

        return RawExperience(
            title=self.field(node, "title"),
            company=company.strip() or None,
            employment_type=self.field(node, "employment_type") or suffix.strip() or None,
            location=self.field(node, "location"),
            start_date=start_date,
            end_date=end_date,
            end_date_is_present=end_date_is_present,
            description=self.field(node, "description"),
        )
