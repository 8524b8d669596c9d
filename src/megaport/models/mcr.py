# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""MCR (cloud router) and prefix filter list models."""

from __future__ import annotations

import ipaddress
from enum import Enum

from pydantic import ConfigDict, Field, field_validator, model_validator

from .base import APIModel, PortInterface, ProductBase

VALID_MCR_PORT_SPEEDS = (1000, 2500, 5000, 10000)
"""MCR speeds (Mbps) the ordering API accepts."""


class MCROrderConfig(APIModel):
    mcr_asn: int | None = None
    diversity_zone: str | None = None


class MCROrder(APIModel):
    location_id: int
    product_name: str
    term: int
    product_type: str = "MCR2"
    port_speed: int
    cost_centre: str | None = None
    promo_code: str | None = None
    config: MCROrderConfig = Field(default_factory=MCROrderConfig)


class MCRVirtualRouter(APIModel):
    model_config = ConfigDict(alias_generator=None, populate_by_name=True, extra="ignore")

    id: int = 0
    asn: int = Field(0, alias="mcrAsn")
    name: str = ""
    resource_name: str = ""
    resource_type: str = ""
    speed: int = 0


class MCRResources(APIModel):
    model_config = ConfigDict(alias_generator=None, populate_by_name=True, extra="ignore")

    interface: PortInterface = Field(default_factory=PortInterface)
    virtual_router: MCRVirtualRouter = Field(default_factory=MCRVirtualRouter)


class MCR(ProductBase):
    """Snapshot returned by ``GET /v2/product/{uid}`` for an MCR."""

    port_speed: int = 0
    market: str = ""
    location_id: int = 0
    marketplace_visibility: bool = False
    vxc_permitted: bool = Field(False, alias="vxcpermitted")
    vxc_auto_approval: bool = False
    virtual: bool = False
    diversity_zone: str = ""
    resources: MCRResources = Field(default_factory=MCRResources)


class AddressFamily(str, Enum):
    IPV4 = "IPv4"
    IPV6 = "IPv6"

    @property
    def max_prefix_length(self) -> int:
        return 32 if self is AddressFamily.IPV4 else 128


class PrefixListAction(str, Enum):
    PERMIT = "permit"
    DENY = "deny"


class PrefixListEntry(APIModel):
    """
    One rule of a prefix filter list.

    ``ge``/``le`` bound the matched prefix length and must lie within the
    address family's range with ``ge <= le``; the family check happens on
    the enclosing list.
    """

    action: PrefixListAction
    prefix: str
    ge: int | None = None
    le: int | None = None

    @field_validator("prefix")
    @classmethod
    def check_prefix(cls, v: str) -> str:
        try:
            ipaddress.ip_network(v, strict=False)
        except ValueError as e:
            raise ValueError(f"prefix {v!r} is not a valid network") from e
        return v

    @model_validator(mode="after")
    def check_bounds(self) -> "PrefixListEntry":
        if self.ge is not None and self.le is not None and self.ge > self.le:
            raise ValueError("ge must be less than or equal to le")
        return self


class MCRPrefixFilterList(APIModel):
    """Full prefix filter list, used for create/modify bodies and detail reads."""

    id: int | None = None
    description: str
    address_family: AddressFamily
    entries: list[PrefixListEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_entries(self) -> "MCRPrefixFilterList":
        limit = self.address_family.max_prefix_length
        version = 4 if self.address_family is AddressFamily.IPV4 else 6
        for entry in self.entries:
            if ipaddress.ip_network(entry.prefix, strict=False).version != version:
                raise ValueError(
                    f"prefix {entry.prefix} does not belong to {self.address_family.value}"
                )
            for bound in (entry.ge, entry.le):
                if bound is not None and not 0 <= bound <= limit:
                    raise ValueError(f"ge/le must be between 0 and {limit}")
        return self


class PrefixFilterList(APIModel):
    """Summary entry of ``GET /v2/product/mcr2/{uid}/prefixLists``."""

    id: int
    description: str = ""
    address_family: str = ""


__all__ = [
    "MCR",
    "VALID_MCR_PORT_SPEEDS",
    "AddressFamily",
    "MCROrder",
    "MCROrderConfig",
    "MCRPrefixFilterList",
    "MCRResources",
    "MCRVirtualRouter",
    "PrefixFilterList",
    "PrefixListAction",
    "PrefixListEntry",
]
