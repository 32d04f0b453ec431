"""Identity (top card) extractor.

Prefers the schema.org ``Person`` object from the page's JSON-LD blocks.
Every field missing there falls through, on its own, to the selector
chains from the ``identity`` section of the selector config.
"""

from __future__ import annotations

import json
import logging

from bs4 import Tag

from profile_scraper.config.selectors import SectionSelectors
from profile_scraper.extractors.base import first_value
from profile_scraper.models.raw import RawProfile, Section

logger = logging.getLogger(__name__)

_JSON_LD_SELECTOR = 'script[type="application/ld+json"]'


def _person_in(data: object) -> dict | None:
    """Return the Person object in a decoded JSON-LD document, if any."""
    if isinstance(data, list):
        for item in data:
            person = _person_in(item)
            if person is not None:
                return person
        return None

    if not isinstance(data, dict):
        return None

    if "@graph" in data:
        graph = data["@graph"]
        if isinstance(graph, list):
            for item in graph:
                if isinstance(item, dict) and item.get("@type") == "Person":
                    return item
        return None

    if data.get("@type") == "Person":
        return data
    return None


def find_person(root: Tag) -> dict:
    """Find the first JSON-LD Person on the page; ``{}`` when there is none."""
    for script in root.select(_JSON_LD_SELECTOR):
        try:
            data = json.loads(script.string or "")
        except ValueError:
            logger.debug("Skipping invalid JSON-LD block")
            continue

        person = _person_in(data)
        if person is not None:
            return person
    return {}


def _ld_text(value: object) -> str | None:
    """Read a plain text value; lists contribute their first usable item."""
    if isinstance(value, list):
        for item in value:
            text = _ld_text(item)
            if text:
                return text
        return None
    if isinstance(value, str):
        return value.strip() or None
    return None


def _ld_image(value: object) -> str | None:
    if isinstance(value, dict):
        return _ld_text(value.get("contentUrl")) or _ld_text(value.get("url"))
    return _ld_text(value)


def _ld_locality(address: object) -> str | None:
    if isinstance(address, list):
        address = address[0] if address else None
    if isinstance(address, dict):
        return _ld_text(address.get("addressLocality"))
    return None


class ProfileExtractor:
    """Extracts exactly one ``RawProfile`` from a page snapshot."""

    section = Section.IDENTITY

    def __init__(self, selectors: SectionSelectors) -> None:
        self._selectors = selectors

    def extract_raw(self, root: Tag, url: str) -> RawProfile:
        person = find_person(root)
        if person:
            logger.debug("Found JSON-LD Person data")

        return RawProfile(
            url=url,
            full_name=_ld_text(person.get("name")) or self._field(root, "full_name"),
            title=_ld_text(person.get("jobTitle")) or self._field(root, "title"),
            location=_ld_locality(person.get("address")) or self._field(root, "location"),
            photo=_ld_image(person.get("image")) or self._field(root, "photo"),
            description=_ld_text(person.get("description")) or self._field(root, "description"),
        )

    def _field(self, root: Tag, name: str) -> str | None:
        return first_value(root, self._selectors.chain(name))
