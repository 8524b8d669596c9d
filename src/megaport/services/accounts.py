# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Billing markets and partner-managed accounts."""

from __future__ import annotations

import logging

from ..exceptions import NoResultsError
from ..models.account import (
    BillingMarket,
    BillingMarketSet,
    ManagedAccount,
    ManagedAccountRequest,
    SetBillingMarketRequest,
)
from .base import BaseService

logger = logging.getLogger(__name__)


class BillingMarketService(BaseService):
    resource = "billing_market"

    async def list_billing_markets(self) -> list[BillingMarket]:
        return await self._client.request_model("GET", "/v2/market", list[BillingMarket])

    async def set_billing_market(self, request: SetBillingMarketRequest) -> int:
        """Register (or replace) the billing contact for a market; returns the supply id."""
        result = await self._client.request_model(
            "POST", "/v2/market", BillingMarketSet, body=request
        )
        logger.info(
            f"Set billing market {request.country} (first party {request.first_party_id})"
        )
        return result.supply_id


class ManagedAccountService(BaseService):
    """Accounts a Megaport partner manages on behalf of its customers."""

    resource = "managed_account"

    async def list_managed_accounts(self) -> list[ManagedAccount]:
        return await self._client.request_model(
            "GET", "/v2/managedCompanies", list[ManagedAccount]
        )

    async def create_managed_account(self, request: ManagedAccountRequest) -> ManagedAccount:
        account = await self._client.request_model(
            "POST", "/v2/managedCompanies", ManagedAccount, body=request
        )
        logger.info(f"Created managed account {account.company_uid} ({account.account_name})")
        return account

    async def update_managed_account(
        self, company_uid: str, request: ManagedAccountRequest
    ) -> ManagedAccount:
        return await self._client.request_model(
            "PUT", f"/v2/managedCompanies/{company_uid}", ManagedAccount, body=request
        )

    async def get_managed_account(self, account_name: str) -> ManagedAccount:
        """
        Exact name lookup.

        Raises:
            NoResultsError: If no managed account is called ``account_name``.
        """
        for account in await self.list_managed_accounts():
            if account.account_name == account_name:
                return account
        raise NoResultsError(f"no managed account named {account_name!r}")


__all__ = ["BillingMarketService", "ManagedAccountService"]
