"""Raw extraction records and per-node extraction outcomes.

Raw records hold the text exactly as it was read from the page (trimmed,
nothing else).  They are produced by the section extractors and consumed by
the ``RecordNormalizer``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Section(str, Enum):
    """Profile content sections."""

    IDENTITY = "identity"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    VOLUNTEERING = "volunteering"
    SKILLS = "skills"


@dataclass
class RawProfile:
    url: str
    full_name: str | None = None
    title: str | None = None
    location: str | None = None
    photo: str | None = None
    description: str | None = None


@dataclass
class RawExperience:
    title: str | None = None
    company: str | None = None
    employment_type: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    end_date_is_present: bool = False
    description: str | None = None


@dataclass
class RawEducation:
    school_name: str | None = None
    degree_name: str | None = None
    field_of_study: str | None = None
    start_date: str | None = None
    end_date: str | None = None


@dataclass
class RawVolunteerExperience:
    title: str | None = None
    company: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    end_date_is_present: bool = False
    description: str | None = None


@dataclass
class RawSkill:
    skill_name: str | None = None
    endorsement_count: str | None = None  # e.g. "12 endorsements"


RawRecord = Union[
    RawProfile, RawExperience, RawEducation, RawVolunteerExperience, RawSkill
]


@dataclass
class NodeOutcome:
    """Result of extracting a single matched node.

    Exactly one of ``record`` / ``skipped_reason`` is set.
    """

    index: int  # Position of the node in document order
    record: RawRecord | None = None
    skipped_reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.record is not None


@dataclass
class SectionExtraction:
    """All node outcomes of one section, in document order."""

    section: Section
    strategy_index: int | None = None  # Winning node strategy, None if none matched
    outcomes: list[NodeOutcome] = field(default_factory=list)

    @property
    def records(self) -> list[RawRecord]:
        return [o.record for o in self.outcomes if o.record is not None]

    @property
    def skipped(self) -> list[NodeOutcome]:
        return [o for o in self.outcomes if not o.ok]
