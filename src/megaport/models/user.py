# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Company user (employment) models."""

from __future__ import annotations

import re
from email.utils import parseaddr
from enum import Enum

from pydantic import Field, field_validator

from .base import APIModel, EpochMillis

_PHONE_RE = re.compile(r"^\+?[1-9]\d{1,14}$")


class UserPosition(str, Enum):
    COMPANY_ADMIN = "Company Admin"
    TECHNICAL_ADMIN = "Technical Admin"
    TECHNICAL_CONTACT = "Technical Contact"
    FINANCE = "Finance"
    FINANCIAL_CONTACT = "Financial Contact"
    READ_ONLY = "Read Only"


def _check_email(v: str) -> str:
    if not v:
        raise ValueError("email is required")
    if len(v) < 5:
        raise ValueError("email must be at least 5 characters long")
    _, address = parseaddr(v)
    if not address or "@" not in address or address.startswith("@") or address.endswith("@"):
        raise ValueError("email is not a valid address")
    return v


def _check_phone(v: str) -> str:
    if not _PHONE_RE.match(v):
        raise ValueError("phone must be in international format, e.g. +61412345678")
    return v


def _check_name(v: str) -> str:
    if not v.strip():
        raise ValueError("must not be blank")
    return v


class UserEmail(APIModel):
    email_address_id: int = 0
    email: str = ""
    primary: bool = False
    bad_email: bool = False
    bad_email_type: str | None = None
    bad_email_reason: str | None = None


class User(APIModel):
    """
    A company user.

    ``party_id`` and ``person_id`` both identify the employee; list responses
    only carry the latter.
    """

    salutation: str = ""
    position: str = ""
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    mobile: str = ""
    email: str = ""
    party_id: int = 0
    person_id: int = 0
    username: str = ""
    description: str = ""
    active: bool = False
    uid: str = ""
    person_uid: str = ""
    emails: list[UserEmail] = Field(default_factory=list)
    channel_manager: bool = False
    require_totp: bool = False
    notification_enabled: bool = False
    security_roles: list[str] = Field(default_factory=list)
    feature_flags: list[str] = Field(default_factory=list)
    newsletter: bool = False
    promotions: bool = False
    mfa_enabled: bool = False
    confirmation_pending: bool = False
    invitation_pending: bool = False
    name: str = ""
    company_id: int = 0
    employment_id: int = 0
    company_name: str = ""

    @property
    def employee_id(self) -> int:
        return self.party_id or self.person_id


class CreateUserRequest(APIModel):
    """Body of ``POST /v2/employment``. Validated before it is sent."""

    first_name: str
    last_name: str
    active: bool = True
    email: str
    phone: str
    position: UserPosition

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        return _check_phone(v)

    @field_validator("first_name", "last_name")
    @classmethod
    def check_names(cls, v: str) -> str:
        return _check_name(v)


class UpdateUserRequest(APIModel):
    """Body of ``PUT /v2/employee/{id}``. ``None`` fields are left unchanged."""

    notification_enabled: bool | None = None
    position: UserPosition | None = None
    company_id: int | None = None
    newsletter: bool | None = None
    promotions: bool | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    channel_manager: bool | None = None
    active: bool | None = None
    security_roles: list[str] | None = None
    email: str | None = None

    @field_validator("first_name", "last_name")
    @classmethod
    def check_names(cls, v: str | None) -> str | None:
        return None if v is None else _check_name(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str | None) -> str | None:
        return None if v is None else _check_phone(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str | None) -> str | None:
        return None if v is None else _check_email(v)

    @field_validator("company_id")
    @classmethod
    def check_company_id(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("company_id must be a positive integer")
        return v


class UserActivity(APIModel):
    """Entry of the portal activity log (``GET /v3/activity``)."""

    login_name: str = ""
    person_id: int = 0
    description: str = ""
    name: str = ""
    create_date: EpochMillis | None = None
    user_type: str = ""


class CreatedUser(APIModel):
    """``data`` of a successful ``POST /v2/employment``."""

    company_id: int = 0
    employment_id: int = 0
    employee_id: int = 0


__all__ = [
    "CreateUserRequest",
    "CreatedUser",
    "UpdateUserRequest",
    "User",
    "UserActivity",
    "UserEmail",
    "UserPosition",
]
