# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Port order and snapshot models."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from .base import APIModel, EpochMillis, PortInterface, ProductBase, ProductLocationDetails


class PortOrderConfig(APIModel):
    diversity_zone: str | None = None


class PortOrder(APIModel):
    """Body entry for ``POST /v3/networkdesign/buy`` when ordering a port."""

    product_name: str
    term: int
    product_type: str = "MEGAPORT"
    port_speed: int
    location_id: int
    create_date: EpochMillis
    virtual: bool = False
    market: str = ""
    cost_centre: str | None = None
    lag_port_count: int | None = None
    marketplace_visibility: bool = False
    config: PortOrderConfig = Field(default_factory=PortOrderConfig)
    promo_code: str | None = None
    resource_tags: list[dict[str, str]] | None = None


class TerminatedServiceLocation(APIModel):
    model_config = ConfigDict(alias_generator=None, populate_by_name=True, extra="ignore")

    id: int = 0
    name: str = ""
    site_code: str = ""


class TerminatedServiceDetails(APIModel):
    location: TerminatedServiceLocation = Field(default_factory=TerminatedServiceLocation)
    interface: PortInterface = Field(default_factory=PortInterface)
    device: str = ""


class PortAttributeTags(APIModel):
    terminated_service_details: TerminatedServiceDetails | None = None


class PortResources(APIModel):
    interface: PortInterface = Field(default_factory=PortInterface)


class Port(ProductBase):
    """Snapshot returned by ``GET /v2/product/{uid}`` for a port."""

    port_speed: int = 0
    market: str = ""
    location_id: int = 0
    marketplace_visibility: bool = False
    vxc_permitted: bool = Field(False, alias="vxcpermitted")
    vxc_auto_approval: bool = False
    lag_primary: bool = False
    lag_id: int = 0
    aggregation_id: int = 0
    virtual: bool = False
    buyout_port: bool = False
    diversity_zone: str = ""
    attribute_tags: PortAttributeTags | None = None  # type: ignore[assignment]
    resources: PortResources = Field(default_factory=PortResources)
    location_details: ProductLocationDetails | None = Field(None, alias="locationDetail")
    resource_tags: dict[str, str] | None = None


__all__ = [
    "Port",
    "PortAttributeTags",
    "PortOrder",
    "PortOrderConfig",
    "PortResources",
    "TerminatedServiceDetails",
]
