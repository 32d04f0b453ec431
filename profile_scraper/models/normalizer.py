"""Record normalization logic.

Transforms raw extraction records into validated Pydantic models. Handles:
- Whitespace normalization (collapse whitespace runs and line breaks to one space)
- Removal of UI artifacts ("...", "See more", "See less")
- Location string resolution into a structured Location
- Month/year date normalization and inclusive durations
- Endorsement count parsing

No DOM or network access: everything here works on plain strings.
"""

from __future__ import annotations

import re
from datetime import tzinfo
from typing import Callable

from pydantic import BaseModel

from profile_scraper.dates import PRESENT, duration_in_days, normalize_date
from profile_scraper.geo.location import LocationResolver
from profile_scraper.models.raw import (
    RawEducation,
    RawExperience,
    RawProfile,
    RawRecord,
    RawSkill,
    RawVolunteerExperience,
)
from profile_scraper.models.schemas import (
    Education,
    Experience,
    Location,
    Profile,
    Skill,
    VolunteerExperience,
)

_WHITESPACE_RE = re.compile(r"\s+")
_NON_DIGIT_RE = re.compile(r"\D")

# Text the site renders inside content blocks for its expand/collapse widgets
_UI_ARTIFACTS = ("...", "See more", "See less")


def normalize_whitespace(text: str) -> str:
    """Collapse multiple whitespace characters into a single space and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def clean_text(text: str | None) -> str | None:
    """Normalize whitespace and drop UI artifacts; empty results become None.

    Removing an artifact can make a new one appear ("See moSee morere"), so
    the cleanup repeats until nothing changes.  That makes the function
    idempotent.
    """
    if not text:
        return None

    previous = None
    while text != previous:
        previous = text
        for artifact in _UI_ARTIFACTS:
            text = text.replace(artifact, "")
        text = normalize_whitespace(text)

    return text or None


def parse_count(text: str | None) -> int:
    """Read the digits out of a count label ("1,234 endorsements" → 1234)."""
    if not text:
        return 0
    digits = _NON_DIGIT_RE.sub("", text)
    return int(digits) if digits else 0


class RecordNormalizer:
    """Maps raw records to their typed, cleaned counterparts."""

    def __init__(
        self,
        location_resolver: LocationResolver | None = None,
        tzinfo: tzinfo | None = None,
    ) -> None:
        self._resolver = location_resolver or LocationResolver()
        self._tz = tzinfo
        self._handlers: dict[type, Callable[..., BaseModel]] = {
            RawProfile: self.normalize_profile,
            RawExperience: self.normalize_experience,
            RawEducation: self.normalize_education,
            RawVolunteerExperience: self.normalize_volunteer_experience,
            RawSkill: self.normalize_skill,
        }

    def normalize(self, raw: RawRecord) -> BaseModel:
        """Normalize any raw record into its output model."""
        try:
            handler = self._handlers[type(raw)]
        except KeyError:
            raise TypeError(f"Unsupported raw record type: {type(raw).__name__}") from None
        return handler(raw)

    def normalize_profile(self, raw: RawProfile) -> Profile:
        return Profile(
            full_name=clean_text(raw.full_name),
            title=clean_text(raw.title),
            location=self._location(raw.location),
            photo=(raw.photo or "").strip() or None,
            description=clean_text(raw.description),
            url=raw.url,
        )

    def normalize_experience(self, raw: RawExperience) -> Experience:
        start_date, end_date, duration = self._span(
            raw.start_date, raw.end_date, raw.end_date_is_present
        )
        return Experience(
            title=clean_text(raw.title),
            company=clean_text(raw.company),
            employment_type=clean_text(raw.employment_type),
            location=self._location(raw.location),
            start_date=start_date,
            end_date=end_date,
            end_date_is_present=raw.end_date_is_present,
            duration_in_days=duration,
            description=clean_text(raw.description),
        )

    def normalize_education(self, raw: RawEducation) -> Education:
        start_date, end_date, duration = self._span(raw.start_date, raw.end_date)
        return Education(
            school_name=clean_text(raw.school_name),
            degree_name=clean_text(raw.degree_name),
            field_of_study=clean_text(raw.field_of_study),
            start_date=start_date,
            end_date=end_date,
            duration_in_days=duration,
        )

    def normalize_volunteer_experience(
        self, raw: RawVolunteerExperience
    ) -> VolunteerExperience:
        start_date, end_date, duration = self._span(
            raw.start_date, raw.end_date, raw.end_date_is_present
        )
        return VolunteerExperience(
            title=clean_text(raw.title),
            company=clean_text(raw.company),
            start_date=start_date,
            end_date=end_date,
            end_date_is_present=raw.end_date_is_present,
            duration_in_days=duration,
            description=clean_text(raw.description),
        )

    def normalize_skill(self, raw: RawSkill) -> Skill:
        return Skill(
            skill_name=clean_text(raw.skill_name),
            endorsement_count=parse_count(raw.endorsement_count),
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _location(self, text: str | None) -> Location | None:
        return self._resolver.resolve(clean_text(text))

    def _span(self, start_text, end_text, end_is_present=False):
        """Normalize both endpoints and the inclusive duration between them.

        Ongoing entries end "now", evaluated on every call.
        """
        start = normalize_date(clean_text(start_text), self._tz)
        end = normalize_date(PRESENT if end_is_present else clean_text(end_text), self._tz)
        return start, end, duration_in_days(start, end)
