"""Billing provisioning use cases."""

from portcullis.application.use_cases.billing.provision_billing import (
    BillingProvisioningService,
)

__all__ = ["BillingProvisioningService"]
