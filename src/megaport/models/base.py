# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Base model and shared wire types.

All API payloads are camelCase JSON wrapped in a ``{message, terms, data}``
envelope. Timestamps are epoch milliseconds.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")

VALID_TERMS = (1, 12, 24, 36)
"""Contract terms (months) accepted by the ordering API."""


def _from_epoch_millis(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    return value


def _to_epoch_millis(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


EpochMillis = Annotated[
    datetime,
    BeforeValidator(_from_epoch_millis),
    PlainSerializer(_to_epoch_millis, return_type=int),
]
"""A datetime carried on the wire as integer epoch milliseconds."""


class APIModel(BaseModel):
    """
    Base for every request and response model.

    Field names are snake_case in Python and camelCase on the wire. Unknown
    fields are ignored so new API attributes never break decoding.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a request body: wire names, unset optionals dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Envelope(APIModel, Generic[T]):
    """Standard response wrapper."""

    message: str = ""
    terms: str = ""
    data: T


class ProvisioningStatus(str, Enum):
    """Lifecycle states reported in ``provisioningStatus``."""

    NEW = "NEW"
    DESIGN = "DESIGN"
    DEPLOYABLE = "DEPLOYABLE"
    CONFIGURED = "CONFIGURED"
    LIVE = "LIVE"
    CANCELLED = "CANCELLED"
    CANCELLED_PARENT = "CANCELLED_PARENT"
    DECOMMISSIONED = "DECOMMISSIONED"
    FAILED = "FAILED"


READY_STATES = frozenset({ProvisioningStatus.CONFIGURED.value, ProvisioningStatus.LIVE.value})


class ProductType(str, Enum):
    """Product type strings used in orders and product paths."""

    MEGAPORT = "MEGAPORT"
    VXC = "VXC"
    MCR2 = "MCR2"
    MVE = "MVE"
    IX = "IX"

    @property
    def path_segment(self) -> str:
        """Lower-case form used in ``/v2/product/{type}/...`` paths."""
        return self.value.lower()


class OrderConfirmation(APIModel):
    """One entry of the ``data`` list returned by the ordering endpoint."""

    technical_service_uid: str


class ProductLocationDetails(APIModel):
    name: str = ""
    city: str = ""
    metro: str = ""
    country: str = ""


class PortInterface(APIModel):
    """Physical interface details (snake_case on the wire)."""

    model_config = ConfigDict(alias_generator=None, populate_by_name=True, extra="ignore")

    demarcation: str = ""
    description: str = ""
    id: int = 0
    loa_template: str = ""
    media: str = ""
    name: str = ""
    port_speed: int = 0
    resource_name: str = ""
    resource_type: str = ""
    up: int = 0


class ProductBase(APIModel):
    """Fields common to every product snapshot (port, MCR, MVE, VXC, IX)."""

    product_id: int = 0
    product_uid: str = ""
    product_name: str = ""
    product_type: str = ""
    provisioning_status: str = ""
    create_date: EpochMillis | None = None
    created_by: str = ""
    live_date: EpochMillis | None = None
    terminate_date: EpochMillis | None = None
    contract_start_date: EpochMillis | None = None
    contract_end_date: EpochMillis | None = None
    contract_term_months: int = 0
    company_uid: str = ""
    company_name: str = ""
    cost_centre: str = ""
    secondary_name: str = ""
    usage_algorithm: str = ""
    locked: bool = False
    admin_locked: bool = False
    cancelable: bool = False
    attribute_tags: dict[str, Any] = {}

    @property
    def uid(self) -> str:
        return self.product_uid

    @property
    def name(self) -> str:
        return self.product_name


class ProductSummary(ProductBase):
    """Entry of ``GET /v2/products``; the full shape depends on the type."""

    location_id: int = 0
    port_speed: int = 0
    rate_limit: int = 0
    market: str = ""


__all__ = [
    "VALID_TERMS",
    "APIModel",
    "Envelope",
    "EpochMillis",
    "OrderConfirmation",
    "PortInterface",
    "ProductBase",
    "ProductLocationDetails",
    "ProductSummary",
    "ProductType",
    "ProvisioningStatus",
    "READY_STATES",
]
