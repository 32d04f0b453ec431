"""Volunteer experience section extractor."""

from __future__ import annotations

from bs4 import Tag

from profile_scraper.extractors.base import SectionExtractor, split_date_range
from profile_scraper.models.raw import RawVolunteerExperience, Section


class VolunteeringExtractor(SectionExtractor):
    section = Section.VOLUNTEERING
    identity_fields = ("title",)

    def extract_node(self, node: Tag) -> RawVolunteerExperience:
        start_date, end_date, end_date_is_present = split_date_range(
            self.field(node, "date_range")
        )
        return RawVolunteerExperience(
            title=self.field(node, "title"),
            company=self.field(node, "company"),
            start_date=start_date,
            end_date=end_date,
            end_date_is_present=end_date_is_present,
            description=self.field(node, "description"),
        )
