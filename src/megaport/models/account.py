# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Company account models: billing markets and partner-managed accounts."""

from __future__ import annotations

from pydantic import Field

from .base import APIModel

FIRST_PARTY_IDS = {
    "US": 1558,
    "AU": 808,
    "AT": 20442,
    "BE": 20449,
    "BG": 4640,
    "CA": 1652,
    "CH": 8299,
    "DE": 4515,
    "DK": 20447,
    "ES": 30369,
    "FI": 20440,
    "FR": 20451,
    "HK": 819,
    "IE": 2683,
    "IT": 30367,
    "JP": 20453,
    "LU": 30423,
    "NL": 2685,
    "NO": 20438,
    "NZ": 855,
    "PL": 20444,
    "SE": 2681,
    "SG": 817,
    "UK": 2675,
}
"""Megaport billing entity (``first_party_id``) per country code."""


class BillingMarket(APIModel):
    """A billing market registered for the company (``GET /v2/market``)."""

    id: int = 0
    well_known_supplier: str = ""
    supplier_name: str = ""
    currency_enum: str = ""
    language: str = ""
    billing_contact_name: str = ""
    billing_contact_email: str = ""
    billing_contact_phone: str = ""
    address1: str = ""
    postcode: str = ""
    country: str = ""
    city: str = ""
    state: str = ""
    invoice_template: str = ""
    tax_rate: float = 0.0
    estimate_invoice: float = 0.0
    first_party_id: int = 0
    second_party_id: int = 0
    attach_invoice_to_email: bool = False
    region: str = ""
    payment_term_in_days: int = 0
    stripe_account_publishable_key: str = ""
    stripe_supported_bank_currencies: list[str] = Field(default_factory=list)
    vat_exempt: bool = False
    active: bool = False
    secured_hash: str = ""


class SetBillingMarketRequest(APIModel):
    """Body of ``POST /v2/market``. ``first_party_id`` picks the market (see FIRST_PARTY_IDS)."""

    currency_enum: str
    language: str
    billing_contact_name: str
    billing_contact_phone: str
    billing_contact_email: str
    address1: str
    address2: str | None = None
    city: str
    state: str
    postcode: str
    country: str
    your_po_number: str | None = None
    tax_number: str | None = None
    first_party_id: int


class BillingMarketSet(APIModel):
    supply_id: int = 0


class ManagedAccount(APIModel):
    account_ref: str = ""
    account_name: str = ""
    company_uid: str = ""


class ManagedAccountRequest(APIModel):
    """
    Body for creating or updating a managed account.

    ``account_ref`` is the partner's own reference (e.g. a CRM id); it is
    printed on invoices.
    """

    account_name: str = Field(min_length=1, max_length=128)
    account_ref: str = Field(min_length=1)


__all__ = [
    "FIRST_PARTY_IDS",
    "BillingMarket",
    "BillingMarketSet",
    "ManagedAccount",
    "ManagedAccountRequest",
    "SetBillingMarketRequest",
]
