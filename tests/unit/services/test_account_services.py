"""Unit tests for BillingMarketService and ManagedAccountService."""

import pydantic
import pytest

from megaport.exceptions import NoResultsError
from megaport.models import ManagedAccountRequest, SetBillingMarketRequest
from megaport.models.account import FIRST_PARTY_IDS

ACCOUNTS = [
    {"accountRef": "crm-1", "accountName": "Acme", "companyUid": "c-1"},
    {"accountRef": "crm-2", "accountName": "Globex", "companyUid": "c-2"},
]


def billing_request(**overrides):
    fields = {
        "currency_enum": "AUD",
        "language": "en",
        "billing_contact_name": "Sam Lee",
        "billing_contact_phone": "+61412345678",
        "billing_contact_email": "billing@example.com",
        "address1": "1 George St",
        "city": "Sydney",
        "state": "NSW",
        "postcode": "2000",
        "country": "AU",
        "first_party_id": FIRST_PARTY_IDS["AU"],
    }
    fields.update(overrides)
    return SetBillingMarketRequest(**fields)


class TestBillingMarkets:
    """Tests for billing market registration."""

    @pytest.mark.asyncio
    async def test_list(self, client, fake_api):
        fake_api.reply(
            "GET",
            "/v2/market",
            [{"id": 9, "currencyEnum": "AUD", "firstPartyId": 808, "active": True}],
        )
        [market] = await client.billing_markets.list_billing_markets()
        assert market.currency_enum == "AUD"
        assert market.first_party_id == 808
        assert market.active

    @pytest.mark.asyncio
    async def test_set_returns_supply_id(self, client, fake_api):
        fake_api.reply("POST", "/v2/market", {"supplyId": 1234})
        assert await client.billing_markets.set_billing_market(billing_request()) == 1234
        body = fake_api.last_json("POST", "/v2/market")
        assert body["firstPartyId"] == 808
        assert body["billingContactEmail"] == "billing@example.com"
        assert "address2" not in body
        assert "yourPoNumber" not in body

    def test_request_requires_contact(self):
        with pytest.raises(pydantic.ValidationError):
            SetBillingMarketRequest(currency_enum="AUD", language="en")


class TestManagedAccounts:
    """Tests for partner-managed accounts."""

    @pytest.mark.asyncio
    async def test_list(self, client, fake_api):
        fake_api.reply("GET", "/v2/managedCompanies", ACCOUNTS)
        accounts = await client.managed_accounts.list_managed_accounts()
        assert [a.company_uid for a in accounts] == ["c-1", "c-2"]

    @pytest.mark.asyncio
    async def test_create(self, client, fake_api):
        fake_api.reply("POST", "/v2/managedCompanies", ACCOUNTS[0])
        account = await client.managed_accounts.create_managed_account(
            ManagedAccountRequest(account_name="Acme", account_ref="crm-1")
        )
        assert account.company_uid == "c-1"
        assert fake_api.last_json("POST", "/v2/managedCompanies") == {
            "accountName": "Acme",
            "accountRef": "crm-1",
        }

    @pytest.mark.asyncio
    async def test_update(self, client, fake_api):
        fake_api.reply("PUT", "/v2/managedCompanies/c-1", {**ACCOUNTS[0], "accountName": "Acme Pty"})
        account = await client.managed_accounts.update_managed_account(
            "c-1", ManagedAccountRequest(account_name="Acme Pty", account_ref="crm-1")
        )
        assert account.account_name == "Acme Pty"

    @pytest.mark.asyncio
    async def test_get_by_name(self, client, fake_api):
        fake_api.reply("GET", "/v2/managedCompanies", ACCOUNTS)
        account = await client.managed_accounts.get_managed_account("Globex")
        assert account.account_ref == "crm-2"

    @pytest.mark.asyncio
    async def test_get_unknown_name(self, client, fake_api):
        fake_api.reply("GET", "/v2/managedCompanies", ACCOUNTS)
        with pytest.raises(NoResultsError):
            await client.managed_accounts.get_managed_account("Initech")

    @pytest.mark.parametrize("name", ["", "x" * 129])
    def test_account_name_length(self, name):
        with pytest.raises(pydantic.ValidationError):
            ManagedAccountRequest(account_name=name, account_ref="crm-1")
