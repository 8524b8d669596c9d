# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Internet exchange (IX) models."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from .base import APIModel, EpochMillis, ProductBase


class IXOrderConfiguration(APIModel):
    product_name: str
    network_service_type: str
    asn: int
    mac_address: str
    rate_limit: int
    vlan: int
    shutdown: bool = False
    promo_code: str | None = None


class IXOrder(APIModel):
    """Order body entry: the IX attaches to an existing port."""

    product_uid: str
    associated_ixs: list[IXOrderConfiguration]


class IXUpdate(APIModel):
    """Body of ``PUT /v2/product/ix/{uid}``. ``None`` fields are left unchanged."""

    name: str | None = None
    rate_limit: int | None = None
    cost_centre: str | None = None
    vlan: int | None = None
    mac_address: str | None = None
    asn: int | None = None
    password: str | None = None
    public_graph: bool | None = None
    reverse_dns: str | None = None
    a_end_product_uid: str | None = None
    shutdown: bool | None = None


class IXLocationDetail(APIModel):
    name: str = ""
    city: str = ""
    metro: str = ""
    country: str = ""


class _SnakeModel(APIModel):
    model_config = ConfigDict(alias_generator=None, populate_by_name=True, extra="ignore")


class IXInterface(_SnakeModel):
    demarcation: str = ""
    loa_template: str = ""
    media: str = ""
    port_speed: int = 0
    resource_name: str = ""
    resource_type: str = ""
    up: int = 0
    shutdown: bool = False


class IXBGPConnection(_SnakeModel):
    asn: int = 0
    customer_asn: int = 0
    customer_ip_address: str = ""
    isp_asn: int = 0
    isp_ip_address: str = ""
    ix_peer_policy: str = ""
    max_prefixes: int = 0
    resource_name: str = ""
    resource_type: str = ""


class IXIPAddress(_SnakeModel):
    address: str = ""
    resource_name: str = ""
    resource_type: str = ""
    version: int = 0
    reverse_dns: str = ""


class IXVPLSInterface(_SnakeModel):
    mac_address: str = ""
    rate_limit_mbps: int = 0
    resource_name: str = ""
    resource_type: str = ""
    vlan: int = 0
    shutdown: bool = False


class IXResources(_SnakeModel):
    interface: IXInterface | None = None
    bgp_connections: list[IXBGPConnection] = Field(
        default_factory=list, alias="bgp_connection"
    )
    ip_addresses: list[IXIPAddress] = Field(default_factory=list, alias="ip_address")
    vpls_interface: IXVPLSInterface | None = None


class IX(ProductBase):
    """Snapshot returned by ``GET /v2/product/{uid}`` for an IX."""

    location_id: int = 0
    location_detail: IXLocationDetail | None = None
    location_uid: str = ""
    term: int = 0
    rate_limit: int = 0
    promo_code: str = ""
    deploy_date: EpochMillis | None = None
    vlan: int = 0
    mac_address: str = ""
    ix_peer_macro: str = ""
    asn: int = 0
    network_service_type: str = ""
    public_graph: bool = False
    resources: IXResources | None = None


__all__ = [
    "IX",
    "IXBGPConnection",
    "IXInterface",
    "IXIPAddress",
    "IXLocationDetail",
    "IXOrder",
    "IXOrderConfiguration",
    "IXResources",
    "IXUpdate",
    "IXVPLSInterface",
]
