# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Data centre locations, countries and billing market codes."""

from __future__ import annotations

import logging

from ..exceptions import NoResultsError
from ..models.location import Country, Location, NetworkRegion
from .base import BaseService, fuzzy_match

logger = logging.getLogger(__name__)

# Countries served by Megaport proper are listed under this network region.
MEGAPORT_NETWORK_REGION = "MP1"


class LocationService(BaseService):
    resource = "location"

    async def list_locations(self) -> list[Location]:
        return await self._client.request_model("GET", "/v2/locations", list[Location])

    async def get_location_by_id(self, location_id: int) -> Location:
        """
        Raises:
            NoResultsError: If no location has ``location_id``.
        """
        for location in await self.list_locations():
            if location.id == location_id:
                return location
        raise NoResultsError(f"no location with id {location_id}")

    async def get_location_by_name(self, name: str) -> Location:
        """
        Exact, case-sensitive name lookup.

        Raises:
            NoResultsError: If no location is called ``name``.
        """
        for location in await self.list_locations():
            if location.name == name:
                return location
        raise NoResultsError(f"no location named {name!r}")

    async def search_locations(self, search: str) -> list[Location]:
        """
        Locations whose name contains the characters of ``search`` in order.

        Raises:
            NoResultsError: If nothing matches.
        """
        matches = [
            location
            for location in await self.list_locations()
            if fuzzy_match(search, location.name)
        ]
        if not matches:
            raise NoResultsError(f"no locations match {search!r}")
        logger.debug(f"{len(matches)} locations match {search!r}")
        return matches

    async def list_countries(self) -> list[Country]:
        regions = await self._client.request_model(
            "GET", "/v2/networkRegions", list[NetworkRegion]
        )
        for region in regions:
            if region.network_region == MEGAPORT_NETWORK_REGION:
                return region.countries
        return []

    async def list_market_codes(self) -> list[str]:
        """Billing market codes; one per country (the country's prefix)."""
        return [country.prefix for country in await self.list_countries()]

    async def is_valid_market_code(self, market_code: str) -> bool:
        return market_code in await self.list_market_codes()

    async def filter_by_market_code(
        self, market_code: str, locations: list[Location] | None = None
    ) -> list[Location]:
        """
        Locations in ``market_code``.

        Filters ``locations`` when given, otherwise every location. An unknown
        market code yields an empty list.
        """
        if not await self.is_valid_market_code(market_code):
            logger.warning(f"Unknown market code {market_code!r}")
            return []
        if locations is None:
            locations = await self.list_locations()
        return [location for location in locations if location.market == market_code]

    @staticmethod
    def filter_by_mcr_availability(
        locations: list[Location], mcr_available: bool = True
    ) -> list[Location]:
        """
        Locations whose MCR availability equals ``mcr_available``.

        Locations without product details count as having no MCR. No match
        yields an empty list.
        """
        return [
            location
            for location in locations
            if (location.products is not None and location.products.mcr) == mcr_available
        ]


__all__ = ["LocationService", "MEGAPORT_NETWORK_REGION"]
