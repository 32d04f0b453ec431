"""Reference place-name lists for classifying location fragments.

Countries come from ``pycountry`` (ISO 3166), cities from ``geonamescache``
(GeoNames cities).  Lookups are case-insensitive exact matches; there is no
fuzzy matching.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable

import geonamescache
import pycountry

logger = logging.getLogger(__name__)

# Names the site uses that the reference lists don't carry (lower cased)
COUNTRY_OVERRIDES = frozenset({"united states", "the netherlands"})
CITY_OVERRIDES = frozenset({"new york"})


def _fold(names: Iterable[str]) -> frozenset[str]:
    return frozenset(name.strip().lower() for name in names if name and name.strip())


class Gazetteer:
    """Set-membership classifier for country and city names."""

    def __init__(
        self,
        countries: Iterable[str],
        cities: Iterable[str],
        *,
        country_overrides: Iterable[str] = COUNTRY_OVERRIDES,
        city_overrides: Iterable[str] = CITY_OVERRIDES,
    ) -> None:
        self._countries = _fold(countries) | _fold(country_overrides)
        self._cities = _fold(cities) | _fold(city_overrides)

    def is_country(self, text: str | None) -> bool:
        if not text:
            return False
        return text.strip().lower() in self._countries

    def is_city(self, text: str | None) -> bool:
        if not text:
            return False
        return text.strip().lower() in self._cities

    @classmethod
    def default(cls) -> "Gazetteer":
        """Return the shared gazetteer built from the reference datasets."""
        return _default_gazetteer()


def _country_names() -> list[str]:
    names: list[str] = []
    for country in pycountry.countries:
        names.append(country.name)
        # ISO inverts some names: "Netherlands, Kingdom of the"
        short, sep, _ = country.name.partition(", ")
        if sep:
            names.append(short)
        # Not every record carries these
        for attr in ("common_name", "official_name"):
            value = getattr(country, attr, None)
            if value:
                names.append(value)
    return names


def _city_names() -> list[str]:
    cities = geonamescache.GeonamesCache().get_cities()
    return [city["name"] for city in cities.values()]


@lru_cache(maxsize=1)
def _default_gazetteer() -> Gazetteer:
    countries = _country_names()
    cities = _city_names()
    logger.debug(
        "Loaded gazetteer: %d country names, %d city names",
        len(countries),
        len(cities),
    )
    return Gazetteer(countries, cities)
