"""Public models for the profile scraper."""

from profile_scraper.models.raw import (
    NodeOutcome,
    RawEducation,
    RawExperience,
    RawProfile,
    RawRecord,
    RawSkill,
    RawVolunteerExperience,
    Section,
    SectionExtraction,
)
from profile_scraper.models.schemas import (
    Education,
    Experience,
    Location,
    Profile,
    ScrapeResult,
    Skill,
    VolunteerExperience,
)

__all__ = [
    "Education",
    "Experience",
    "Location",
    "NodeOutcome",
    "Profile",
    "RawEducation",
    "RawExperience",
    "RawProfile",
    "RawRecord",
    "RawSkill",
    "RawVolunteerExperience",
    "ScrapeResult",
    "Section",
    "SectionExtraction",
    "Skill",
    "VolunteerExperience",
]
