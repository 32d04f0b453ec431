"""Selector strategy models and YAML loader.

The CSS selectors used to find profile sections change whenever the site
ships a new layout, so they live in ``selectors.yaml`` rather than in code.
Each section lists its node strategies (most specific / modern first) and,
per field, a fallback chain of field selectors.
"""

from __future__ import annotations

import logging
from pathlib import Path

import soupsieve
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from profile_scraper.models.raw import Section

logger = logging.getLogger(__name__)

DEFAULT_SELECTORS_PATH = Path(__file__).with_name("selectors.yaml")


def _check_css(selector: str) -> str:
    try:
        soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as exc:
        raise ValueError(f"Invalid CSS selector {selector!r}: {exc}") from exc
    return selector


class FieldSelector(BaseModel):
    """One link of a field fallback chain.

    In YAML a bare string is shorthand for ``{css: <string>}``.
    """

    css: str = Field(..., min_length=1)
    index: int = Field(default=0, ge=0)  # Which match to use
    attribute: str | None = None  # Read this attribute instead of the text

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, value: object) -> object:
        if isinstance(value, str):
            return {"css": value}
        return value

    @field_validator("css")
    @classmethod
    def _valid_css(cls, value: str) -> str:
        return _check_css(value)


class SectionSelectors(BaseModel):
    """Node strategies and field chains for one section."""

    nodes: list[str] = []
    fields: dict[str, list[FieldSelector]] = {}

    @field_validator("nodes")
    @classmethod
    def _valid_nodes(cls, value: list[str]) -> list[str]:
        return [_check_css(selector) for selector in value]

    def chain(self, field: str) -> list[FieldSelector]:
        return self.fields.get(field, [])


class SelectorConfig(BaseModel):
    """Selector strategies for every section."""

    sections: dict[Section, SectionSelectors]

    def for_section(self, section: Section) -> SectionSelectors:
        return self.sections.get(section, SectionSelectors())


def _read_selector_config(path: Path) -> SelectorConfig:
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    return SelectorConfig.model_validate(raw)


def load_selector_config(yaml_path: str | None = None) -> SelectorConfig:
    """Parse a selectors YAML file into a typed ``SelectorConfig``.

    Args:
        yaml_path: Path to a custom selectors file.  ``None`` loads the
            packaged defaults.

    Returns:
        The parsed config.  A custom file that is missing or invalid is
        logged and replaced by the packaged defaults.
    """
    if yaml_path is None:
        return _read_selector_config(DEFAULT_SELECTORS_PATH)

    path = Path(yaml_path)

    if not path.exists():
        logger.warning("Selectors file not found at %s, using packaged defaults", yaml_path)
        return _read_selector_config(DEFAULT_SELECTORS_PATH)

    try:
        return _read_selector_config(path)
    except yaml.YAMLError as exc:
        logger.error("Failed to parse selectors YAML at %s: %s", yaml_path, exc)
    except ValueError as exc:
        logger.error("Invalid selectors config at %s: %s", yaml_path, exc)

    return _read_selector_config(DEFAULT_SELECTORS_PATH)
