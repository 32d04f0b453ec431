"""Section extractors package: pluggable registry + base class."""

from profile_scraper.extractors.base import SectionExtractor
from profile_scraper.extractors.education import EducationExtractor
from profile_scraper.extractors.experience import ExperienceExtractor
from profile_scraper.extractors.profile import ProfileExtractor
from profile_scraper.extractors.registry import ExtractorRegistry, create_default_registry
from profile_scraper.extractors.skills import SkillsExtractor
from profile_scraper.extractors.volunteering import VolunteeringExtractor

__all__ = [
    "EducationExtractor",
    "ExperienceExtractor",
    "ExtractorRegistry",
    "ProfileExtractor",
    "SectionExtractor",
    "SkillsExtractor",
    "VolunteeringExtractor",
    "create_default_registry",
]
