"""Resolve free-text locations into city / province / country.

Profile locations look like ``"Amsterdam Oud-West, North Holland Province,
Netherlands"``, ``"Sacramento, California Area"`` or just ``"Netherlands"``.
The number of comma-separated parts decides how much can be trusted:

* 3 parts: positional, always city, province, country.
* 2 parts: city + country, or city + province; when the first part is not a
  known city it is taken as province + country.
* 1 part:  country, else city, else assumed to be a province.

The check order matters for names that are ambiguous between a city and a
region, so keep it exactly as is.
"""

from __future__ import annotations

from profile_scraper.geo.gazetteer import Gazetteer
from profile_scraper.models.schemas import Location

_AREA_SUFFIX = " Area"
_SEPARATOR = ", "


class LocationResolver:
    """Turns location strings into ``Location`` objects."""

    def __init__(self, gazetteer: Gazetteer | None = None) -> None:
        self._gazetteer = gazetteer

    @property
    def gazetteer(self) -> Gazetteer:
        # The reference datasets are only loaded once something needs them
        if self._gazetteer is None:
            self._gazetteer = Gazetteer.default()
        return self._gazetteer

    def resolve(self, text: str | None) -> Location | None:
        if not text:
            return None

        cleaned = text.strip().removesuffix(_AREA_SUFFIX).strip()
        if not cleaned:
            return None
        # Blank parts such as "Amsterdam, , Netherlands" carry nothing
        parts = [part.strip() or None for part in cleaned.split(_SEPARATOR)]
        if not any(parts):
            return None

        if len(parts) == 3:
            return Location(city=parts[0], province=parts[1], country=parts[2])

        if len(parts) == 2:
            return self._resolve_pair(parts[0], parts[1])

        return self._resolve_single(parts[0])

    def _resolve_pair(self, first: str | None, second: str | None) -> Location:
        is_city = self.gazetteer.is_city(first)
        is_country = self.gazetteer.is_country(second)

        if is_city and is_country:
            return Location(city=first, country=second)
        if is_city and not is_country:
            return Location(city=first, province=second)
        return Location(province=first, country=second)

    def _resolve_single(self, part: str | None) -> Location:
        if self.gazetteer.is_country(part):
            return Location(country=part)
        if self.gazetteer.is_city(part):
            return Location(city=part)
        return Location(province=part)


def resolve_location(text: str | None) -> Location | None:
    """Resolve *text* with the default reference gazetteer."""
    return LocationResolver().resolve(text)
