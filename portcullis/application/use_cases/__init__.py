"""Use cases: one service per provisioning concern plus the registration workflow."""

from portcullis.application.use_cases.billing import BillingProvisioningService
from portcullis.application.use_cases.channels import ChannelProvisioningService
from portcullis.application.use_cases.identity import IdentityProvisioningService
from portcullis.application.use_cases.onboarding import RegistrationWorkflow
from portcullis.application.use_cases.webhooks import WebhookAppProvisioningService

__all__ = [
    "BillingProvisioningService",
    "ChannelProvisioningService",
    "IdentityProvisioningService",
    "RegistrationWorkflow",
    "WebhookAppProvisioningService",
]
