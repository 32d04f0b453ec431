"""Abstract base class for profile section extractors.

Each extractor handles a single ``Section`` and turns a parsed page snapshot
into raw records.  Entries are located with an ordered list of node
strategies: the first strategy that matches anything wins and the others are
not tried.  Fields inside an entry are read through fallback selector chains
in the same short-circuit fashion.

A node that blows up during extraction is skipped and recorded as such; it
never takes the rest of the section down with it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Sequence

from bs4 import Tag

from profile_scraper.config.selectors import FieldSelector, SectionSelectors
from profile_scraper.dates import PRESENT
from profile_scraper.models.normalizer import clean_text
from profile_scraper.models.raw import (
    NodeOutcome,
    RawRecord,
    Section,
    SectionExtraction,
)

logger = logging.getLogger(__name__)

Strategy = Callable[[Tag], list[Tag]]

_EN_DASH = "–"
_SPACED_HYPHEN = " - "
_MIDDLE_DOT = "·"


# ---------------------------------------------------------------------------
# Strategy and field helpers
# ---------------------------------------------------------------------------


def css_strategy(selector: str) -> Strategy:
    """Build a node strategy that selects all elements matching *selector*."""

    def query(root: Tag) -> list[Tag]:
        return root.select(selector)

    query.__name__ = f"css({selector})"
    return query


def first_match(
    root: Tag, strategies: Sequence[Strategy]
) -> tuple[int | None, list[Tag]]:
    """Return the index and nodes of the first strategy matching anything."""
    for index, strategy in enumerate(strategies):
        nodes = strategy(root)
        if nodes:
            return index, nodes
    return None, []


def _read(element: Tag, link: FieldSelector) -> str | None:
    if link.attribute:
        value = element.get(link.attribute)
        if isinstance(value, list):  # Multi-valued attributes such as class
            value = " ".join(value)
    else:
        value = element.get_text()
    value = (value or "").strip()
    return value or None


def select_text(node: Tag, chain: Sequence[FieldSelector]) -> str | None:
    """Read the field from the first chain link that matches an element.

    The first matching element decides, even when its text is empty.
    """
    for link in chain:
        matches = node.select(link.css)
        if len(matches) > link.index:
            return _read(matches[link.index], link)
    return None


def first_value(node: Tag, chain: Sequence[FieldSelector]) -> str | None:
    """Like ``select_text`` but keeps going until a link yields a value."""
    for link in chain:
        matches = node.select(link.css)
        if len(matches) > link.index:
            value = _read(matches[link.index], link)
            if value:
                return value
    return None


def split_date_range(text: str | None) -> tuple[str | None, str | None, bool]:
    """Split "Jan 2020 – Present · 3 yrs" into (start, end, end_is_present).

    An ongoing range gets ``PRESENT`` as its end.  A range without an end
    fragment yields ``None`` for the end.
    """
    if not text:
        return None, None, False

    text = text.split(_MIDDLE_DOT, 1)[0]
    if _EN_DASH in text:
        parts = text.split(_EN_DASH)
    else:
        parts = text.split(_SPACED_HYPHEN)

    start = parts[0].strip() or None
    end = parts[1].strip() if len(parts) > 1 else ""

    if "present" in end.lower():
        return start, PRESENT, True
    return start, end or None, False


# ---------------------------------------------------------------------------
# Base extractor
# ---------------------------------------------------------------------------


class SectionExtractor(ABC):
    """Abstract base extractor that all list-section extractors extend.

    Subclasses MUST set ``section`` and ``identity_fields`` as class
    attributes and implement ``extract_node``.  A record is only kept when at
    least one of its ``identity_fields`` still has text after cleaning.
    """

    section: Section
    identity_fields: tuple[str, ...] = ()

    def __init__(self, selectors: SectionSelectors) -> None:
        self._selectors = selectors
        self.strategies: list[Strategy] = [
            css_strategy(selector) for selector in selectors.nodes
        ]

    @abstractmethod
    def extract_node(self, node: Tag) -> RawRecord:
        """Read one matched entry node into a raw record."""
        ...

    def extract(self, root: Tag) -> SectionExtraction:
        """Run the node strategies against *root* and extract every entry."""
        strategy_index, nodes = first_match(root, self.strategies)
        extraction = SectionExtraction(
            section=self.section, strategy_index=strategy_index
        )

        if strategy_index is None:
            logger.debug("No %s entries found", self.section.value)
            return extraction

        for index, node in enumerate(nodes):
            extraction.outcomes.append(self._extract_one(index, node))

        return extraction

    def extract_raw(self, root: Tag) -> list[RawRecord]:
        """Return only the kept raw records, in document order."""
        return self.extract(root).records

    def field(self, node: Tag, name: str) -> str | None:
        return select_text(node, self._selectors.chain(name))

    def is_identified(self, record: RawRecord) -> bool:
        return any(clean_text(getattr(record, name)) for name in self.identity_fields)

    def _extract_one(self, index: int, node: Tag) -> NodeOutcome:
        try:
            record = self.extract_node(node)
        except Exception as exc:
            logger.debug(
                "Skipping %s node %d: %s",
                self.section.value,
                index,
                exc,
                exc_info=True,
            )
            return NodeOutcome(
                index=index, skipped_reason=f"{type(exc).__name__}: {exc}"
            )

        if not self.is_identified(record):
            return NodeOutcome(index=index, skipped_reason="no identifying fields")

        return NodeOutcome(index=index, record=record)
