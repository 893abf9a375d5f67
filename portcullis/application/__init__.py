"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (platform clients, directory repo,
guild gateway).
"""

from portcullis.application.interfaces import (
    IBillingPlatform,
    IDirectoryRepository,
    IGuildGateway,
    IIdentityPlatform,
    ILogoProvider,
    IWebhookAppPlatform,
)
from portcullis.application.services import validate_submission
from portcullis.application.use_cases import (
    BillingProvisioningService,
    ChannelProvisioningService,
    IdentityProvisioningService,
    RegistrationWorkflow,
    WebhookAppProvisioningService,
)

__all__ = [
    "BillingProvisioningService",
    "ChannelProvisioningService",
    "IBillingPlatform",
    "IDirectoryRepository",
    "IGuildGateway",
    "IIdentityPlatform",
    "ILogoProvider",
    "IWebhookAppPlatform",
    "IdentityProvisioningService",
    "RegistrationWorkflow",
    "WebhookAppProvisioningService",
    "validate_submission",
]
