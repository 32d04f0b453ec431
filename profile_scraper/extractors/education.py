"""Education section extractor."""

from __future__ import annotations

from bs4 import Tag

from profile_scraper.extractors.base import SectionExtractor, split_date_range
from profile_scraper.models.raw import RawEducation, Section


class EducationExtractor(SectionExtractor):
    """Extractor for the education section.

    Dates come from ``<time>`` elements when the layout has them, otherwise
    from a "2014 - 2018" style range text.
    """

    section = Section.EDUCATION
    identity_fields = ("school_name",)

    def extract_node(self, node: Tag) -> RawEducation:
        start_date = self.field(node, "start_date")
        end_date = self.field(node, "end_date")

        if start_date is None and end_date is None:
            start_date, end_date, _ = split_date_range(self.field(node, "date_range"))

        return RawEducation(
            school_name=self.field(node, "school_name"),
            degree_name=self.field(node, "degree_name"),
            field_of_study=self.field(node, "field_of_study"),
            start_date=start_date,
            end_date=end_date,
        )
