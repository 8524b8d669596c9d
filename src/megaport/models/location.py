# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Location, country and network region models."""

from __future__ import annotations

from pydantic import Field

from .base import APIModel, EpochMillis


class LocationMVEDetails(APIModel):
    size: str = ""
    label: str = ""
    cpu_core_count: int = 0
    ram_gb: int = Field(0, alias="ramGB")
    bandwidth_mbps: int = 0


class LocationMVE(APIModel):
    sizes: list[str] = Field(default_factory=list)
    details: list[LocationMVEDetails] = Field(default_factory=list)
    max_cpu_count: int = 0
    version: str = ""
    product: str = ""
    vendor: str = ""
    vendor_description: str = ""
    id: int = 0
    release_image: bool = False


class LocationProducts(APIModel):
    mcr: bool = False
    mcr_version: int = 0
    megaport: list[int] = Field(default_factory=list)
    mve: list[LocationMVE] = Field(default_factory=list)
    mcr1: list[int] = Field(default_factory=list)
    mcr2: list[int] = Field(default_factory=list)


class Location(APIModel):
    id: int
    name: str = ""
    country: str = ""
    live_date: EpochMillis | None = None
    site_code: str = ""
    network_region: str = ""
    address: dict[str, str] = Field(default_factory=dict)
    campus: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    products: LocationProducts | None = None
    market: str = ""
    metro: str = ""
    v_router_available: bool = False
    status: str = ""


class Country(APIModel):
    code: str = ""
    name: str = ""
    prefix: str = ""
    site_count: int = 0


class NetworkRegion(APIModel):
    """Entry of ``GET /v2/networkRegions``; countries are grouped per region."""

    network_region: str = ""
    countries: list[Country] = Field(default_factory=list)


__all__ = [
    "Country",
    "Location",
    "LocationMVE",
    "LocationMVEDetails",
    "LocationProducts",
    "NetworkRegion",
]
