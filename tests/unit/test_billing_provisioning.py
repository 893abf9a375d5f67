"""BillingProvisioningService: customer creation, billing link, quotes."""

from datetime import datetime, timedelta, timezone

import pytest

from portcullis.application.dtos.directory import DirectoryOrganizationRecord
from portcullis.domain.enums import CustomerType
from portcullis.domain.exceptions import ProvisioningException, ResourceNotFoundException


async def _store_org(directory_repo) -> None:
    await directory_repo.upsert_organization(
        DirectoryOrganizationRecord(
            id="org_1", created_by="user_1", organization_name="Acme Corp", api_key="pk_acme-corp_x"
        )
    )


async def test_create_customer_links_organization(billing_service, billing_platform, directory_repo) -> None:
    """The customer id is written back onto the directory organization."""
    await _store_org(directory_repo)
    customer = await billing_service.create_customer(
        name="Acme Corp",
        customer_type=CustomerType.CORPORATE,
        currency="USD",
        billing_email="ada.lovelace@acme.co",
        directory_org_id="org_1",
    )
    assert customer.id == "cus_1"
    assert customer.organization_id == "org_1"
    billing_platform.create_customer.assert_awaited_once_with(
        name="Acme Corp",
        customer_type="corporate",
        currency="USD",
        billing_email="ada.lovelace@acme.co",
    )
    assert directory_repo.organizations["org_1"].hyperline_id == "cus_1"


async def test_create_customer_requires_directory_organization(billing_service, billing_platform) -> None:
    """Unknown organization id fails before the platform is called."""
    with pytest.raises(ResourceNotFoundException):
        await billing_service.create_customer(
            name="Acme Corp",
            customer_type=CustomerType.PERSON,
            currency="EUR",
            billing_email="ada@acme.co",
            directory_org_id="missing",
        )
    billing_platform.create_customer.assert_not_awaited()


async def test_create_customer_without_id_fails(billing_service, billing_platform, directory_repo) -> None:
    """A response without a customer id is a provisioning failure."""
    await _store_org(directory_repo)
    billing_platform.create_customer.return_value = None
    with pytest.raises(ProvisioningException, match="No customer ID returned"):
        await billing_service.create_customer(
            name="Acme Corp",
            customer_type=CustomerType.CORPORATE,
            currency="USD",
            billing_email="ada@acme.co",
            directory_org_id="org_1",
        )
    assert directory_repo.organizations["org_1"].hyperline_id is None


async def test_create_quote_expires_in_30_days(billing_service, billing_platform) -> None:
    """Quote expiry is creation time plus 30 days."""
    now = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)
    quote = await billing_service.create_quote("cus_1", amount=1250, currency="USD", now=now)
    assert quote.expires_at == now + timedelta(days=30)
    assert quote.display_amount == "12.50 USD"
    assert quote.hosted_url == "https://quotes.example/quo_1"
    billing_platform.create_quote.assert_awaited_once_with(
        customer_id="cus_1", amount=1250, currency="USD", expires_at=now + timedelta(days=30)
    )
