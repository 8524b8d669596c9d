"""Unit tests for LocationService."""

import pytest

from megaport.exceptions import NoResultsError
from megaport.models import Location
from megaport.services import LocationService

LOCATIONS = [
    {"id": 1, "name": "Equinix SY1", "market": "AU", "status": "Active"},
    {"id": 2, "name": "Global Switch Sydney", "market": "AU", "status": "Active"},
    {"id": 3, "name": "Equinix LD5", "market": "UK", "status": "Active"},
]

REGIONS = [
    {"networkRegion": "XX9", "countries": [{"code": "ZZZ", "prefix": "ZZ"}]},
    {
        "networkRegion": "MP1",
        "countries": [
            {"code": "AUS", "name": "Australia", "prefix": "AU", "siteCount": 40},
            {"code": "GBR", "name": "United Kingdom", "prefix": "UK", "siteCount": 12},
        ],
    },
]


@pytest.fixture
def locations_api(fake_api):
    fake_api.reply("GET", "/v2/locations", LOCATIONS)
    fake_api.reply("GET", "/v2/networkRegions", REGIONS)
    return fake_api


class TestLocationLookup:
    """Tests for finding locations."""

    @pytest.mark.asyncio
    async def test_by_id(self, client, locations_api):
        location = await client.locations.get_location_by_id(3)
        assert location.name == "Equinix LD5"

    @pytest.mark.asyncio
    async def test_by_id_missing(self, client, locations_api):
        with pytest.raises(NoResultsError):
            await client.locations.get_location_by_id(99)

    @pytest.mark.asyncio
    async def test_by_name_is_exact(self, client, locations_api):
        """Name lookup does not match partial or differently cased names."""
        assert (await client.locations.get_location_by_name("Equinix SY1")).id == 1
        with pytest.raises(NoResultsError):
            await client.locations.get_location_by_name("equinix sy1")

    @pytest.mark.asyncio
    async def test_search_is_fuzzy(self, client, locations_api):
        """Search matches characters in order, not only substrings."""
        matches = await client.locations.search_locations("EqSY")
        assert [location.id for location in matches] == [1]

        matches = await client.locations.search_locations("Sydney")
        assert [location.id for location in matches] == [2]

    @pytest.mark.asyncio
    async def test_search_without_matches(self, client, locations_api):
        with pytest.raises(NoResultsError):
            await client.locations.search_locations("Tokyo")


class TestMarketCodes:
    """Tests for countries and market codes."""

    @pytest.mark.asyncio
    async def test_countries_from_megaport_region(self, client, locations_api):
        """Only the MP1 region's countries are returned."""
        countries = await client.locations.list_countries()
        assert [c.code for c in countries] == ["AUS", "GBR"]
        assert countries[0].site_count == 40

    @pytest.mark.asyncio
    async def test_no_megaport_region(self, client, fake_api):
        fake_api.reply("GET", "/v2/networkRegions", [REGIONS[0]])
        assert await client.locations.list_countries() == []

    @pytest.mark.asyncio
    async def test_market_codes(self, client, locations_api):
        assert await client.locations.list_market_codes() == ["AU", "UK"]
        assert await client.locations.is_valid_market_code("UK")
        assert not await client.locations.is_valid_market_code("ZZ")

    @pytest.mark.asyncio
    async def test_filter_by_market_code(self, client, locations_api):
        """Filtering fetches every location when none are given."""
        filtered = await client.locations.filter_by_market_code("AU")
        assert [location.id for location in filtered] == [1, 2]

    @pytest.mark.asyncio
    async def test_filter_given_locations(self, client, locations_api):
        everything = await client.locations.list_locations()
        filtered = await client.locations.filter_by_market_code("UK", everything[:2])
        assert filtered == []

    @pytest.mark.asyncio
    async def test_filter_unknown_market_code(self, client, locations_api):
        """An unknown market code yields an empty list, not an error."""
        assert await client.locations.filter_by_market_code("ZZ") == []
        assert not locations_api.sent("GET", "/v2/locations")


class TestMcrAvailability:
    """Tests for filtering locations by MCR availability."""

    LOCATIONS = [
        Location.model_validate({"id": 1, "name": "A", "products": {"mcr": True}}),
        Location.model_validate({"id": 2, "name": "B", "products": {"mcr": False}}),
        Location.model_validate({"id": 3, "name": "C"}),
    ]

    def test_mcr_available(self):
        filtered = LocationService.filter_by_mcr_availability(self.LOCATIONS)
        assert [location.id for location in filtered] == [1]

    def test_mcr_unavailable(self):
        """Locations without product details count as having no MCR."""
        filtered = LocationService.filter_by_mcr_availability(self.LOCATIONS, False)
        assert [location.id for location in filtered] == [2, 3]

    @pytest.mark.asyncio
    async def test_no_match_is_empty(self, client, locations_api):
        """Fetched locations without MCR details filter to an empty list."""
        everything = await client.locations.list_locations()
        assert client.locations.filter_by_mcr_availability(everything) == []
