"""Place-name classification and location resolution."""

from profile_scraper.geo.gazetteer import Gazetteer
from profile_scraper.geo.location import LocationResolver, resolve_location

__all__ = ["Gazetteer", "LocationResolver", "resolve_location"]
