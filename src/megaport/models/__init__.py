# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request and response models for the Megaport API (pydantic v2).

Snapshots returned by ``get_*`` calls are the values the provisioning-wait
predicates evaluate.
"""

from .account import (
    FIRST_PARTY_IDS,
    BillingMarket,
    BillingMarketSet,
    ManagedAccount,
    ManagedAccountRequest,
    SetBillingMarketRequest,
)
from .base import (
    READY_STATES,
    VALID_TERMS,
    APIModel,
    Envelope,
    EpochMillis,
    OrderConfirmation,
    PortInterface,
    ProductBase,
    ProductLocationDetails,
    ProductSummary,
    ProductType,
    ProvisioningStatus,
)
from .ix import IX, IXOrder, IXOrderConfiguration, IXUpdate
from .location import Country, Location, NetworkRegion
from .looking_glass import (
    AsyncBGPNeighborRoutes,
    AsyncIPRoutes,
    AsyncJob,
    AsyncJobStatus,
    BGPNeighborRoute,
    BGPRoute,
    BGPSession,
    BGPSessionStatus,
    IPRoute,
    RouteDirection,
    RouteProtocol,
)
from .mcr import (
    MCR,
    VALID_MCR_PORT_SPEEDS,
    AddressFamily,
    MCROrder,
    MCROrderConfig,
    MCRPrefixFilterList,
    PrefixFilterList,
    PrefixListAction,
    PrefixListEntry,
)
from .mve import (
    MVE,
    ArubaConfig,
    AviatrixConfig,
    CiscoConfig,
    FortinetConfig,
    GenericVendorConfig,
    MerakiConfig,
    MVEConfig,
    MVEImage,
    MVEImageCatalog,
    MVENetworkInterface,
    MVEOrder,
    MVESize,
    PaloAltoConfig,
    PrismaConfig,
    SixwindVSRConfig,
    VendorConfig,
    VendorConfigBase,
    VersaConfig,
    VmwareConfig,
    normalize_vendor,
)
from .partner import PartnerMegaport
from .port import Port, PortOrder, PortOrderConfig
from .product import ModifyProductRequest, MVEUpdate
from .service_key import (
    CreatedServiceKey,
    CreateServiceKeyRequest,
    ServiceKey,
    UpdateServiceKeyRequest,
    ValidFor,
)
from .user import (
    CreatedUser,
    CreateUserRequest,
    UpdateUserRequest,
    User,
    UserActivity,
    UserPosition,
)
from .vxc import (
    VXC,
    AWSConnection,
    AWSPartnerConfig,
    AzureConnection,
    AzurePartnerConfig,
    AzurePeeringConfig,
    BfdConfig,
    BgpConnectionConfig,
    CSPConnection,
    GenericConnection,
    GenericPartnerConfig,
    GoogleConnection,
    GooglePartnerConfig,
    IBMPartnerConfig,
    IpRoute,
    OraclePartnerConfig,
    PartnerConfig,
    PartnerConfigInterface,
    PartnerLookup,
    PartnerLookupItem,
    TransitPartnerConfig,
    VirtualRouterConnection,
    VRouterPartnerConfig,
    VXCEndConfiguration,
    VXCOrder,
    VXCOrderConfiguration,
    VXCOrderConfirmation,
    VXCOrderEndpoint,
    VXCUpdate,
)

__all__ = [
    "FIRST_PARTY_IDS",
    "IX",
    "MCR",
    "MVE",
    "READY_STATES",
    "VALID_MCR_PORT_SPEEDS",
    "VALID_TERMS",
    "VXC",
    "APIModel",
    "AWSConnection",
    "AWSPartnerConfig",
    "AddressFamily",
    "AsyncBGPNeighborRoutes",
    "AsyncIPRoutes",
    "AsyncJob",
    "AsyncJobStatus",
    "ArubaConfig",
    "AviatrixConfig",
    "AzureConnection",
    "AzurePartnerConfig",
    "AzurePeeringConfig",
    "BGPNeighborRoute",
    "BGPRoute",
    "BGPSession",
    "BGPSessionStatus",
    "BfdConfig",
    "BgpConnectionConfig",
    "BillingMarket",
    "BillingMarketSet",
    "CSPConnection",
    "CiscoConfig",
    "Country",
    "CreateServiceKeyRequest",
    "CreateUserRequest",
    "CreatedUser",
    "CreatedServiceKey",
    "Envelope",
    "EpochMillis",
    "FortinetConfig",
    "GenericConnection",
    "GenericPartnerConfig",
    "GenericVendorConfig",
    "GoogleConnection",
    "GooglePartnerConfig",
    "IBMPartnerConfig",
    "IXOrder",
    "IXOrderConfiguration",
    "IXUpdate",
    "IPRoute",
    "IpRoute",
    "Location",
    "MCROrder",
    "MCROrderConfig",
    "MCRPrefixFilterList",
    "MVEConfig",
    "MVEImage",
    "MVEImageCatalog",
    "MVENetworkInterface",
    "MVEOrder",
    "MVESize",
    "MVEUpdate",
    "ManagedAccount",
    "ManagedAccountRequest",
    "MerakiConfig",
    "ModifyProductRequest",
    "NetworkRegion",
    "OraclePartnerConfig",
    "OrderConfirmation",
    "PaloAltoConfig",
    "PartnerConfig",
    "PartnerConfigInterface",
    "PartnerLookup",
    "PartnerLookupItem",
    "PartnerMegaport",
    "Port",
    "PortInterface",
    "PortOrder",
    "PortOrderConfig",
    "PrefixFilterList",
    "PrefixListAction",
    "PrefixListEntry",
    "PrismaConfig",
    "ProductBase",
    "ProductLocationDetails",
    "ProductSummary",
    "ProductType",
    "ProvisioningStatus",
    "RouteDirection",
    "RouteProtocol",
    "ServiceKey",
    "SetBillingMarketRequest",
    "SixwindVSRConfig",
    "TransitPartnerConfig",
    "UpdateServiceKeyRequest",
    "UpdateUserRequest",
    "User",
    "UserActivity",
    "UserPosition",
    "ValidFor",
    "VendorConfig",
    "VendorConfigBase",
    "VersaConfig",
    "VirtualRouterConnection",
    "VmwareConfig",
    "VRouterPartnerConfig",
    "VXCEndConfiguration",
    "VXCOrder",
    "VXCOrderConfiguration",
    "VXCOrderConfirmation",
    "VXCOrderEndpoint",
    "VXCUpdate",
    "normalize_vendor",
]
