"""Skills section extractor."""

from __future__ import annotations

from bs4 import Tag

from profile_scraper.extractors.base import SectionExtractor
from profile_scraper.models.raw import RawSkill, Section


class SkillsExtractor(SectionExtractor):
    section = Section.SKILLS
    identity_fields = ("skill_name",)

    def extract_node(self, node: Tag) -> RawSkill:
        return RawSkill(
            skill_name=self.field(node, "skill_name"),
            endorsement_count=self.field(node, "endorsement_count"),
        )
