"""Unit tests for free-text location resolution."""

import pytest

from profile_scraper.geo.gazetteer import Gazetteer
from profile_scraper.geo.location import LocationResolver, resolve_location
from profile_scraper.models.schemas import Location


class TestResolveThreeParts:
    def test_positional(self, resolver: LocationResolver):
        assert resolver.resolve(
            "Amsterdam Oud-West, North Holland Province, Netherlands"
        ) == Location(
            city="Amsterdam Oud-West",
            province="North Holland Province",
            country="Netherlands",
        )

    def test_positional_even_when_unknown(self, resolver: LocationResolver):
        assert resolver.resolve("Foo, Bar, Baz") == Location(
            city="Foo", province="Bar", country="Baz"
        )


class TestResolveTwoParts:
    def test_city_and_country(self, resolver: LocationResolver):
        assert resolver.resolve("Amsterdam, Netherlands") == Location(
            city="Amsterdam", country="Netherlands"
        )

    def test_city_and_province_with_area_suffix(self, resolver: LocationResolver):
        assert resolver.resolve("Sacramento, California Area") == Location(
            city="Sacramento", province="California"
        )

    def test_province_and_country(self, resolver: LocationResolver):
        assert resolver.resolve("North Holland, Netherlands") == Location(
            province="North Holland", country="Netherlands"
        )

    def test_unknown_first_part_is_province(self, resolver: LocationResolver):
        assert resolver.resolve("Somewhere, Elsewhere") == Location(
            province="Somewhere", country="Elsewhere"
        )


class TestResolveOnePart:
    def test_country(self, resolver: LocationResolver):
        assert resolver.resolve("Netherlands") == Location(country="Netherlands")

    def test_city(self, resolver: LocationResolver):
        assert resolver.resolve("Berlin") == Location(city="Berlin")

    def test_unknown_is_province(self, resolver: LocationResolver):
        assert resolver.resolve("Bavaria") == Location(province="Bavaria")

    def test_country_wins_over_city(self):
        gazetteer = Gazetteer(["Luxembourg"], ["Luxembourg"])
        assert LocationResolver(gazetteer).resolve("Luxembourg") == Location(
            country="Luxembourg"
        )

    def test_greater_area(self, resolver: LocationResolver):
        assert resolver.resolve("Greater Berlin Area") == Location(
            province="Greater Berlin"
        )


class TestResolveEdgeCases:
    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_nothing_to_resolve(self, resolver: LocationResolver, text):
        assert resolver.resolve(text) is None

    def test_area_only_stripped_as_suffix(self, resolver: LocationResolver):
        assert resolver.resolve("Area 51") == Location(province="Area 51")

    def test_blank_middle_part_is_none(self, resolver: LocationResolver):
        assert resolver.resolve("Amsterdam, , Netherlands") == Location(
            city="Amsterdam", country="Netherlands"
        )

    def test_blank_leading_part_is_none(self, resolver: LocationResolver):
        assert resolver.resolve(", Germany") == Location(country="Germany")

    def test_four_parts_use_first_part(self, resolver: LocationResolver):
        assert resolver.resolve("Berlin, Mitte, Berlin State, Germany") == Location(
            city="Berlin"
        )

    def test_preserves_original_casing(self, resolver: LocationResolver):
        assert resolver.resolve("amsterdam, netherlands") == Location(
            city="amsterdam", country="netherlands"
        )

    def test_lazy_default_gazetteer(self):
        assert LocationResolver().resolve("Amsterdam, Netherlands") == Location(
            city="Amsterdam", country="Netherlands"
        )

    def test_module_helper(self):
        assert resolve_location("Netherlands") == Location(country="Netherlands")
        assert resolve_location(None) is None
