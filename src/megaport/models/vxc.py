# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
VXC (virtual cross connect) models.

Two tagged unions live here:

- ``PartnerConfig``: the ``partnerConfig`` object of an order endpoint,
  keyed on ``connectType`` (AWS, AWSHC, AZURE, GOOGLE, ORACLE, IBM,
  VROUTER, TRANSIT). An A-end config with only ``interfaces`` is a
  VROUTER config.
- ``CSPConnection``: entries of ``resources.csp_connection`` in a VXC
  snapshot, keyed the same way, with a generic fallback for types this SDK
  does not model.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BeforeValidator, ConfigDict, Discriminator, Field, Tag

from .base import APIModel, PortInterface, ProductBase

# =============================================================================
# Partner configurations (order side)
# =============================================================================


class AWSPartnerConfig(APIModel):
    """AWS hosted VIF (``AWS``) or hosted connection (``AWSHC``)."""

    connect_type: Literal["AWS", "AWSHC"] = "AWS"
    type: str = "private"
    owner_account: str
    asn: int | None = None
    amazon_asn: int | None = None
    auth_key: str | None = None
    prefixes: str | None = None
    customer_ip_address: str | None = None
    amazon_ip_address: str | None = None
    connection_name: str | None = Field(None, alias="name")


class AzurePeeringConfig(APIModel):
    model_config = ConfigDict(alias_generator=None, populate_by_name=True, extra="ignore")

    type: str
    peer_asn: str | None = None
    primary_subnet: str | None = None
    secondary_subnet: str | None = None
    prefixes: str | None = None
    shared_key: str | None = None
    vlan: int | None = None


class AzurePartnerConfig(APIModel):
    connect_type: Literal["AZURE"] = "AZURE"
    service_key: str
    peers: list[AzurePeeringConfig] = Field(default_factory=list)


class GooglePartnerConfig(APIModel):
    connect_type: Literal["GOOGLE"] = "GOOGLE"
    pairing_key: str


class OraclePartnerConfig(APIModel):
    connect_type: Literal["ORACLE"] = "ORACLE"
    virtual_circuit_id: str


class IBMPartnerConfig(APIModel):
    connect_type: Literal["IBM"] = "IBM"
    account_id: str
    customer_asn: int | None = None
    name: str | None = None
    customer_ip_address: str | None = None
    provider_ip_address: str | None = None


class IpRoute(APIModel):
    prefix: str
    description: str | None = None
    next_hop: str


class BfdConfig(APIModel):
    tx_interval: int | None = None
    rx_interval: int | None = None
    multiplier: int | None = None


class BgpConnectionConfig(APIModel):
    peer_asn: int
    local_ip_address: str
    peer_ip_address: str
    password: str | None = None
    shutdown: bool = False
    description: str | None = None
    med_in: int | None = None
    med_out: int | None = None
    bfd_enabled: bool = False
    export_policy: str | None = None
    permit_export_to: list[str] | None = None
    deny_export_to: list[str] | None = None
    import_whitelist: int | None = None
    import_blacklist: int | None = None
    export_whitelist: int | None = None
    export_blacklist: int | None = None


class PartnerConfigInterface(APIModel):
    ip_addresses: list[str] | None = None
    ip_routes: list[IpRoute] | None = None
    nat_ip_addresses: list[str] | None = None
    bfd: BfdConfig | None = None
    bgp_connections: list[BgpConnectionConfig] | None = None


class VRouterPartnerConfig(APIModel):
    """A-end configuration when the A-end is an MCR."""

    connect_type: Literal["VROUTER"] = "VROUTER"
    interfaces: list[PartnerConfigInterface] = Field(default_factory=list)


class TransitPartnerConfig(APIModel):
    connect_type: Literal["TRANSIT"] = "TRANSIT"


class GenericPartnerConfig(APIModel):
    """Connect type this SDK has no dedicated model for; extra fields are kept."""

    model_config = ConfigDict(extra="allow")

    connect_type: str = ""


_PARTNER_TAGS = {"AWS", "AWSHC", "AZURE", "GOOGLE", "ORACLE", "IBM", "VROUTER", "TRANSIT"}


def _connect_type_tag(value: Any) -> str:
    if isinstance(value, dict):
        raw = value.get("connectType") or value.get("connect_type")
        has_interfaces = "interfaces" in value
    else:
        raw = getattr(value, "connect_type", None)
        has_interfaces = hasattr(value, "interfaces")
    if not raw and has_interfaces:
        return "VROUTER"
    tag = str(raw or "").upper()
    if tag == "AWSHC":
        return "AWS"
    return tag if tag in _PARTNER_TAGS else "GENERIC"


PartnerConfig = Annotated[
    Union[
        Annotated[AWSPartnerConfig, Tag("AWS")],
        Annotated[AzurePartnerConfig, Tag("AZURE")],
        Annotated[GooglePartnerConfig, Tag("GOOGLE")],
        Annotated[OraclePartnerConfig, Tag("ORACLE")],
        Annotated[IBMPartnerConfig, Tag("IBM")],
        Annotated[VRouterPartnerConfig, Tag("VROUTER")],
        Annotated[TransitPartnerConfig, Tag("TRANSIT")],
        Annotated[GenericPartnerConfig, Tag("GENERIC")],
    ],
    Discriminator(_connect_type_tag),
]


# =============================================================================
# Orders and updates
# =============================================================================


class VXCOrderEndpoint(APIModel):
    """One end of a VXC order. ``vlan=None`` lets the API pick (or untags)."""

    product_uid: str | None = None
    vlan: int | None = None
    inner_vlan: int | None = None
    vnic_index: int | None = Field(None, alias="vNicIndex")
    partner_config: PartnerConfig | None = None


class VXCOrderConfiguration(APIModel):
    product_name: str
    rate_limit: int
    term: int
    shutdown: bool = False
    promo_code: str | None = None
    service_key: str | None = None
    cost_centre: str | None = None
    a_end: VXCOrderEndpoint = Field(default_factory=VXCOrderEndpoint)
    b_end: VXCOrderEndpoint


class VXCOrder(APIModel):
    product_uid: str
    associated_vxcs: list[VXCOrderConfiguration]


class VXCOrderConfirmation(APIModel):
    technical_service_uid: str = Field(alias="vxcJTechnicalServiceUid")


class VXCUpdate(APIModel):
    """Body of ``PUT /v3/product/vxc/{uid}``. ``None`` fields are left unchanged."""

    name: str | None = None
    rate_limit: int | None = None
    a_end_vlan: int | None = None
    b_end_vlan: int | None = None
    a_end_inner_vlan: int | None = None
    b_end_inner_vlan: int | None = None
    a_end_product_uid: str | None = None
    b_end_product_uid: str | None = None
    cost_centre: str | None = None
    term: int | None = None
    shutdown: bool | None = None


# =============================================================================
# Snapshot
# =============================================================================


class _SnakeModel(APIModel):
    model_config = ConfigDict(alias_generator=None, populate_by_name=True, extra="ignore")


class AWSConnection(_SnakeModel):
    connect_type: str = Field("AWS", alias="connectType")
    name: str = ""
    owner_account: str = Field("", alias="ownerAccount")
    bandwidth: int = 0
    vif_id: str = Field("", alias="vif_id")
    asn: int = 0
    amazon_asn: int = Field(0, alias="amazonAsn")
    customer_ip_address: str = Field("", alias="customerIpAddress")
    amazon_ip_address: str = Field("", alias="amazonIpAddress")
    resource_name: str = ""
    resource_type: str = ""


class AzureConnection(_SnakeModel):
    connect_type: str = Field("AZURE", alias="connectType")
    service_key: str = ""
    managed: bool = False
    bandwidth: int = 0
    resource_name: str = ""
    resource_type: str = ""


class GoogleConnection(_SnakeModel):
    connect_type: str = Field("GOOGLE", alias="connectType")
    pairing_key: str = Field("", alias="pairingKey")
    bandwidth: int = 0
    resource_name: str = ""
    resource_type: str = ""


class VirtualRouterConnection(_SnakeModel):
    connect_type: str = Field("VROUTER", alias="connectType")
    vlan: int = 0
    resource_name: str = ""
    resource_type: str = ""
    interfaces: list[dict[str, Any]] = Field(default_factory=list)


class GenericConnection(_SnakeModel):
    model_config = ConfigDict(extra="allow")

    connect_type: str = Field("", alias="connectType")


def _csp_tag(value: Any) -> str:
    if isinstance(value, dict):
        raw = value.get("connectType") or value.get("connect_type") or ""
    else:
        raw = getattr(value, "connect_type", "")
    tag = str(raw).upper()
    if tag in ("AWS", "AWSHC"):
        return "AWS"
    if tag in ("AZURE", "GOOGLE"):
        return tag
    if tag in ("VROUTER", "VIRTUAL_ROUTER"):
        return "VROUTER"
    return "GENERIC"


CSPConnection = Annotated[
    Union[
        Annotated[AWSConnection, Tag("AWS")],
        Annotated[AzureConnection, Tag("AZURE")],
        Annotated[GoogleConnection, Tag("GOOGLE")],
        Annotated[VirtualRouterConnection, Tag("VROUTER")],
        Annotated[GenericConnection, Tag("GENERIC")],
    ],
    Discriminator(_csp_tag),
]


def _as_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    return value


class VLLConfig(_SnakeModel):
    a_vlan: int | None = None
    b_vlan: int | None = None
    description: str = ""
    id: int = 0
    name: str = ""
    rate_limit_mbps: int = 0
    resource_name: str = ""
    resource_type: str = ""


class VXCResources(_SnakeModel):
    interface: list[PortInterface] = Field(default_factory=list)
    virtual_router: Any = None
    csp_connection: Annotated[list[CSPConnection], BeforeValidator(_as_list)] = Field(
        default_factory=list
    )
    vll: VLLConfig | None = None


class VXCEndConfiguration(APIModel):
    owner_uid: str = ""
    product_uid: str = ""
    product_name: str = ""
    location_id: int = 0
    location: str = ""
    vlan: int | None = None
    inner_vlan: int | None = None
    vnic_index: int | None = Field(None, alias="vNicIndex")
    secondary_name: str = ""


class VXCApproval(APIModel):
    status: str | None = None
    message: str | None = None
    uid: str | None = None
    type: str | None = None
    new_speed: int | None = None


class VXC(ProductBase):
    """Snapshot returned by ``GET /v2/product/{uid}`` for a VXC."""

    service_id: int = Field(0, alias="nServiceId")
    rate_limit: int = 0
    distance_band: str = ""
    a_end: VXCEndConfiguration = Field(default_factory=VXCEndConfiguration)
    b_end: VXCEndConfiguration = Field(default_factory=VXCEndConfiguration)
    resources: VXCResources = Field(default_factory=VXCResources)
    vxc_approval: VXCApproval = Field(default_factory=VXCApproval)


# =============================================================================
# Partner port lookup
# =============================================================================


class PartnerLookupItem(APIModel):
    id: int = Field(0, alias="port")
    type: str = ""
    vxc: int | None = None
    product_id: int = 0
    product_uid: str = ""
    name: str = ""
    service_id: int = Field(0, alias="nServiceId")
    description: str = ""
    company_id: int = 0
    company_name: str = ""
    port_speed: int = 0
    location_id: int = 0
    state: str = ""
    country: str = ""


class PartnerLookup(APIModel):
    bandwidth: int = 0
    bandwidths: list[int] = Field(default_factory=list)
    megaports: list[PartnerLookupItem] = Field(default_factory=list)
    peers: list[Any] = Field(default_factory=list)
    resource_type: str = Field("", alias="resource_type")
    service_key: str = Field("", alias="service_key")
    vlan: int = 0


__all__ = [
    "VXC",
    "AWSConnection",
    "AWSPartnerConfig",
    "AzureConnection",
    "AzurePartnerConfig",
    "AzurePeeringConfig",
    "BfdConfig",
    "BgpConnectionConfig",
    "CSPConnection",
    "GenericConnection",
    "GenericPartnerConfig",
    "GoogleConnection",
    "GooglePartnerConfig",
    "IBMPartnerConfig",
    "IpRoute",
    "OraclePartnerConfig",
    "PartnerConfig",
    "PartnerConfigInterface",
    "PartnerLookup",
    "PartnerLookupItem",
    "TransitPartnerConfig",
    "VirtualRouterConnection",
    "VLLConfig",
    "VRouterPartnerConfig",
    "VXCApproval",
    "VXCEndConfiguration",
    "VXCOrder",
    "VXCOrderConfiguration",
    "VXCOrderConfirmation",
    "VXCOrderEndpoint",
    "VXCResources",
    "VXCUpdate",
]
