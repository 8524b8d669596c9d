# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Resource services exposed as attributes of ``MegaportClient``."""

from .accounts import BillingMarketService, ManagedAccountService
from .base import BaseService, OrderResult
from .ix import IXService
from .locations import LocationService
from .looking_glass import LookingGlassService
from .mcr import MCRService
from .mve import MVEService
from .partners import PartnerService
from .ports import PortService
from .products import ProductService
from .service_keys import ServiceKeyService
from .users import UserService
from .vxc import VXCService

__all__ = [
    "BaseService",
    "BillingMarketService",
    "IXService",
    "LocationService",
    "LookingGlassService",
    "MCRService",
    "MVEService",
    "ManagedAccountService",
    "OrderResult",
    "PartnerService",
    "PortService",
    "ProductService",
    "ServiceKeyService",
    "UserService",
    "VXCService",
]
