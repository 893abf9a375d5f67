"""Billing provisioning: customers and quotes in the billing platform."""

from __future__ import annotations

from datetime import datetime, timedelta

from portcullis.application.dtos.billing import BillingCustomer, BillingQuote
from portcullis.application.interfaces.repositories import IDirectoryRepository
from portcullis.application.interfaces.services import IBillingPlatform
from portcullis.core.constants import QUOTE_VALIDITY_DAYS
from portcullis.domain.enums import CustomerType
from portcullis.domain.exceptions import (
    DirectoryPersistenceException,
    ProvisioningException,
    ResourceNotFoundException,
)
from portcullis.shared.telemetry.logging import get_logger
from portcullis.shared.utils.datetime import utc_now

logger = get_logger(__name__)

BILLING_PLATFORM = "hyperline"


class BillingProvisioningService:
    """Creates billing customers (tied to directory organizations) and quotes."""

    def __init__(
        self,
        billing_platform: IBillingPlatform,
        directory_repo: IDirectoryRepository,
    ) -> None:
        self.billing_platform = billing_platform
        self.directory_repo = directory_repo

    async def create_customer(
        self,
        name: str,
        customer_type: CustomerType,
        currency: str,
        billing_email: str,
        directory_org_id: str,
    ) -> BillingCustomer:
        """Create a customer for an organization already in the directory store.

        The customer id is written back onto the organization row.

        Raises:
            ResourceNotFoundException: No directory organization with that id.
            ProvisioningException: The platform returned no customer id.
            DirectoryPersistenceException: The organization row vanished before the link.
        """
        organization = await self.directory_repo.get_organization(directory_org_id)
        if organization is None:
            raise ResourceNotFoundException("organization", directory_org_id)

        customer_id = await self.billing_platform.create_customer(
            name=name,
            customer_type=customer_type.value,
            currency=currency,
            billing_email=billing_email,
        )
        if not customer_id:
            raise ProvisioningException(
                BILLING_PLATFORM, "Failed to create customer: No customer ID returned"
            )
        logger.info(
            "Billing customer created: id=%s organization=%s", customer_id, directory_org_id
        )

        linked = await self.directory_repo.link_billing_customer(directory_org_id, customer_id)
        if not linked:
            raise DirectoryPersistenceException(
                "organization",
                directory_org_id,
                "Failed to update organization with billing customer ID",
            )
        return BillingCustomer(
            id=customer_id,
            name=name,
            customer_type=customer_type,
            currency=currency,
            billing_email=billing_email,
            organization_id=directory_org_id,
        )

    async def create_quote(
        self,
        customer_id: str,
        amount: int,
        currency: str,
        now: datetime | None = None,
    ) -> BillingQuote:
        """Create a quote valid for 30 days. amount is in minor units and not checked locally."""
        expires_at = (now or utc_now()) + timedelta(days=QUOTE_VALIDITY_DAYS)
        receipt = await self.billing_platform.create_quote(
            customer_id=customer_id,
            amount=amount,
            currency=currency,
            expires_at=expires_at,
        )
        logger.info("Billing quote created: id=%s customer=%s", receipt.id, customer_id)
        return BillingQuote(
            id=receipt.id,
            customer_id=customer_id,
            amount=amount,
            currency=currency,
            expires_at=expires_at,
            status=receipt.status,
            hosted_url=receipt.hosted_url,
        )
