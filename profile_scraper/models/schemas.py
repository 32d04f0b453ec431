"""Typed output schemas for scrape results.

All text fields are optional (nullable): a field that could not be found or
cleaned to something non-empty is ``None``.  Dates are timezone-aware
datetimes at the start of the month (or "now" for ongoing entries).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """Structured location resolved from free text."""

    model_config = ConfigDict(frozen=True)

    city: str | None = None
    province: str | None = None
    country: str | None = None


class Profile(BaseModel):
    """Identity section of a person."""

    full_name: str | None = None
    title: str | None = None
    location: Location | None = None
    photo: str | None = None
    description: str | None = None
    url: str


class Experience(BaseModel):
    title: str | None = None
    company: str | None = None
    employment_type: str | None = None
    location: Location | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    end_date_is_present: bool = False
    duration_in_days: int | None = None
    description: str | None = None


class Education(BaseModel):
    school_name: str | None = None
    degree_name: str | None = None
    field_of_study: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    duration_in_days: int | None = None


class VolunteerExperience(BaseModel):
    title: str | None = None
    company: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    end_date_is_present: bool = False
    duration_in_days: int | None = None
    description: str | None = None


class Skill(BaseModel):
    skill_name: str | None = None
    endorsement_count: int = Field(default=0, ge=0)


class ScrapeResult(BaseModel):
    """Everything scraped from one profile page."""

    profile: Profile
    experiences: list[Experience] = []
    education: list[Education] = []
    volunteer_experiences: list[VolunteerExperience] = []
    skills: list[Skill] = []
