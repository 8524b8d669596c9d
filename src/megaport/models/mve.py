# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
MVE (virtual network edge) models.

Vendor configuration is a tagged union keyed on ``vendor``. The API and its
users spell vendors inconsistently ("cisco", "CISCO", "palo alto",
"PALO_ALTO"), so the tag is normalized before dispatch. Vendors this SDK
does not know decode into ``GenericVendorConfig`` with their extra fields
preserved.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, Any, Union

from pydantic import ConfigDict, Discriminator, Field, Tag, field_validator

from .base import APIModel, PortInterface, ProductBase, ProductLocationDetails


class MVESize(str, Enum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"
    X_LARGE_12 = "X_LARGE_12"


_VENDOR_ALIASES = {
    "SIXWIND": "6WIND",
    "SIX_WIND": "6WIND",
    "6WIND_VSR": "6WIND",
    "PALOALTO": "PALO_ALTO",
    "VMWARE_SD_WAN": "VMWARE",
    "PRISMA_SD_WAN": "PRISMA",
}


def normalize_vendor(value: str) -> str:
    """Canonical upper-case vendor tag, e.g. ``"palo alto"`` -> ``"PALO_ALTO"``."""
    tag = re.sub(r"[\s\-]+", "_", value.strip()).upper()
    return _VENDOR_ALIASES.get(tag, tag)


class VendorConfigBase(APIModel):
    """Fields every vendor configuration carries."""

    vendor: str
    image_id: int
    product_size: str | None = None
    mve_label: str | None = None

    @field_validator("vendor")
    @classmethod
    def normalize_vendor_tag(cls, v: str) -> str:
        return normalize_vendor(v)


class SixwindVSRConfig(VendorConfigBase):
    vendor: str = "6WIND"
    ssh_public_key: str | None = None


class ArubaConfig(VendorConfigBase):
    vendor: str = "ARUBA"
    account_name: str | None = None
    account_key: str | None = None
    system_tag: str | None = None


class AviatrixConfig(VendorConfigBase):
    vendor: str = "AVIATRIX"
    cloud_init: str | None = None


class CiscoConfig(VendorConfigBase):
    vendor: str = "CISCO"
    manage_locally: bool | None = None
    admin_ssh_public_key: str | None = None
    ssh_public_key: str | None = None
    cloud_init: str | None = None
    fmc_ip_address: str | None = None
    fmc_registration_key: str | None = None
    fmc_nat_id: str | None = None


class FortinetConfig(VendorConfigBase):
    vendor: str = "FORTINET"
    admin_ssh_public_key: str | None = None
    ssh_public_key: str | None = None
    license_data: str | None = None


class PaloAltoConfig(VendorConfigBase):
    vendor: str = "PALO_ALTO"
    admin_ssh_public_key: str | None = None
    ssh_public_key: str | None = None
    admin_password_hash: str | None = None
    license_data: str | None = None


class PrismaConfig(VendorConfigBase):
    vendor: str = "PRISMA"
    ion_key: str | None = None
    secret_key: str | None = None


class VersaConfig(VendorConfigBase):
    vendor: str = "VERSA"
    director_address: str | None = None
    controller_address: str | None = None
    local_auth: str | None = None
    remote_auth: str | None = None
    serial_number: str | None = None


class VmwareConfig(VendorConfigBase):
    vendor: str = "VMWARE"
    admin_ssh_public_key: str | None = None
    ssh_public_key: str | None = None
    vco_address: str | None = None
    vco_activation_code: str | None = None


class MerakiConfig(VendorConfigBase):
    vendor: str = "MERAKI"
    token: str | None = None


class GenericVendorConfig(VendorConfigBase):
    """Vendor this SDK has no dedicated model for; extra fields are kept."""

    model_config = ConfigDict(extra="allow")


_VENDOR_MODELS: dict[str, type[VendorConfigBase]] = {
    "6WIND": SixwindVSRConfig,
    "ARUBA": ArubaConfig,
    "AVIATRIX": AviatrixConfig,
    "CISCO": CiscoConfig,
    "FORTINET": FortinetConfig,
    "PALO_ALTO": PaloAltoConfig,
    "PRISMA": PrismaConfig,
    "VERSA": VersaConfig,
    "VMWARE": VmwareConfig,
    "MERAKI": MerakiConfig,
}


def _vendor_tag(value: Any) -> str:
    if isinstance(value, dict):
        raw = value.get("vendor", "")
    else:
        raw = getattr(value, "vendor", "")
    tag = normalize_vendor(str(raw or ""))
    return tag if tag in _VENDOR_MODELS else "GENERIC"


VendorConfig = Annotated[
    Union[
        Annotated[SixwindVSRConfig, Tag("6WIND")],
        Annotated[ArubaConfig, Tag("ARUBA")],
        Annotated[AviatrixConfig, Tag("AVIATRIX")],
        Annotated[CiscoConfig, Tag("CISCO")],
        Annotated[FortinetConfig, Tag("FORTINET")],
        Annotated[PaloAltoConfig, Tag("PALO_ALTO")],
        Annotated[PrismaConfig, Tag("PRISMA")],
        Annotated[VersaConfig, Tag("VERSA")],
        Annotated[VmwareConfig, Tag("VMWARE")],
        Annotated[MerakiConfig, Tag("MERAKI")],
        Annotated[GenericVendorConfig, Tag("GENERIC")],
    ],
    Discriminator(_vendor_tag),
]


class MVENetworkInterface(APIModel):
    description: str = ""
    vlan: int | None = None


class MVEConfig(APIModel):
    diversity_zone: str | None = None


class MVEOrder(APIModel):
    location_id: int
    product_name: str
    term: int
    product_type: str = "MVE"
    promo_code: str | None = None
    cost_centre: str | None = None
    network_interfaces: list[MVENetworkInterface] = Field(
        default_factory=list, alias="vnics"
    )
    vendor_config: VendorConfig
    config: MVEConfig = Field(default_factory=MVEConfig)


class MVEVirtualMachineImage(APIModel):
    id: int = 0
    vendor: str = ""
    product: str = ""
    version: str = ""


class MVEVirtualMachine(APIModel):
    model_config = ConfigDict(alias_generator=None, populate_by_name=True, extra="ignore")

    id: int = 0
    cpu_count: int = 0
    image: MVEVirtualMachineImage | None = None
    resource_type: str = ""
    up: bool = False
    vnics: list[MVENetworkInterface] = Field(default_factory=list)


class MVEResources(APIModel):
    model_config = ConfigDict(alias_generator=None, populate_by_name=True, extra="ignore")

    interface: PortInterface | None = None
    virtual_machines: list[MVEVirtualMachine] = Field(
        default_factory=list, alias="virtual_machine"
    )


class MVE(ProductBase):
    """Snapshot returned by ``GET /v2/product/{uid}`` for an MVE."""

    market: str = ""
    location_id: int = 0
    marketplace_visibility: bool = False
    vxc_permitted: bool = Field(False, alias="vxcpermitted")
    vxc_auto_approval: bool = False
    virtual: bool = False
    vendor: str = ""
    size: str = Field("", alias="mveSize")
    diversity_zone: str = ""
    network_interfaces: list[MVENetworkInterface] = Field(
        default_factory=list, alias="vnics"
    )
    resources: MVEResources | None = None
    location_details: ProductLocationDetails | None = Field(None, alias="locationDetail")


class MVEImage(APIModel):
    """An image version, flattened with its product and vendor."""

    id: int
    version: str = ""
    product: str = ""
    vendor: str = ""
    vendor_description: str = ""
    release_image: bool = False
    product_code: str = ""
    available_sizes: list[str] = Field(default_factory=list)


class MVEImageVersion(APIModel):
    id: int
    version: str = ""
    product_code: str = ""
    vendor_description: str = ""
    release_image: bool = False
    available_sizes: list[str] = Field(default_factory=list)


class MVEImageProduct(APIModel):
    product: str = ""
    vendor: str = ""
    vendor_product_id: str = ""
    images: list[MVEImageVersion] = Field(default_factory=list)

    def flatten(self) -> list[MVEImage]:
        return [
            MVEImage(
                id=image.id,
                version=image.version,
                product=self.product,
                vendor=self.vendor,
                vendor_description=image.vendor_description,
                release_image=image.release_image,
                product_code=image.product_code,
                available_sizes=image.available_sizes,
            )
            for image in self.images
        ]


class MVEImageCatalog(APIModel):
    mve_images: list[MVEImageProduct] = Field(default_factory=list)


__all__ = [
    "MVE",
    "ArubaConfig",
    "AviatrixConfig",
    "CiscoConfig",
    "FortinetConfig",
    "GenericVendorConfig",
    "MVEConfig",
    "MVEImage",
    "MVEImageCatalog",
    "MVEImageProduct",
    "MVENetworkInterface",
    "MVEOrder",
    "MVEResources",
    "MVESize",
    "MerakiConfig",
    "PaloAltoConfig",
    "PrismaConfig",
    "SixwindVSRConfig",
    "VendorConfig",
    "VendorConfigBase",
    "VersaConfig",
    "VmwareConfig",
    "normalize_vendor",
]
