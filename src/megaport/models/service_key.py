# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Service key models."""

from __future__ import annotations

from pydantic import model_validator

from .base import APIModel, EpochMillis


class ValidFor(APIModel):
    """Validity window; both ends travel as epoch milliseconds."""

    start: EpochMillis | None = None
    end: EpochMillis | None = None

    @model_validator(mode="after")
    def check_order(self) -> "ValidFor":
        if self.start is not None and self.end is not None and self.end < self.start:
            raise ValueError("end must not be before start")
        return self


class ServiceKey(APIModel):
    key: str
    create_date: EpochMillis | None = None
    company_id: int = 0
    company_uid: str = ""
    company_name: str = ""
    description: str = ""
    product_id: int = 0
    product_uid: str = ""
    product_name: str = ""
    vlan: int | None = None
    max_speed: int = 0
    pre_approved: bool = False
    single_use: bool = False
    last_used: EpochMillis | None = None
    active: bool = False
    valid_for: ValidFor | None = None
    expired: bool = False
    valid: bool = False
    promo_code: str = ""


class CreateServiceKeyRequest(APIModel):
    """
    Body of ``POST /v2/service/key``.

    Either ``product_uid`` or ``product_id`` identifies the port. Single-use
    keys need a ``vlan``.
    """

    product_uid: str | None = None
    product_id: int | None = None
    single_use: bool = False
    max_speed: int
    active: bool | None = None
    pre_approved: bool | None = None
    description: str | None = None
    vlan: int | None = None
    valid_for: ValidFor | None = None

    @model_validator(mode="after")
    def check_identifiers(self) -> "CreateServiceKeyRequest":
        if not self.product_uid and not self.product_id:
            raise ValueError("product_uid or product_id is required")
        if self.single_use and self.vlan is None:
            raise ValueError("vlan is required for single-use keys")
        return self


class UpdateServiceKeyRequest(APIModel):
    """Body of ``PUT /v2/service/key``."""

    key: str
    product_uid: str | None = None
    product_id: int | None = None
    single_use: bool = False
    active: bool = True
    valid_for: ValidFor | None = None


class CreatedServiceKey(APIModel):
    key: str


__all__ = [
    "CreateServiceKeyRequest",
    "CreatedServiceKey",
    "ServiceKey",
    "UpdateServiceKeyRequest",
    "ValidFor",
]
