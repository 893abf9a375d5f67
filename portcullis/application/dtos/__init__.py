"""Application DTOs (plain data passed between use cases and ports)."""

from portcullis.application.dtos.billing import BillingCustomer, BillingQuote, QuoteReceipt
from portcullis.application.dtos.channel import (
    ChannelProvisioningResult,
    ChannelRef,
    PermissionGrant,
    RoleRef,
    WelcomeMessage,
)
from portcullis.application.dtos.directory import (
    DirectoryOrganizationRecord,
    DirectoryUserRecord,
)
from portcullis.application.dtos.identity import (
    IdentityOrganization,
    IdentityProvisioningResult,
    IdentityUser,
    LogoImage,
)
from portcullis.application.dtos.onboarding import RegistrationForm, RegistrationResult
from portcullis.application.dtos.webhook import WebhookApp

__all__ = [
    "BillingCustomer",
    "BillingQuote",
    "ChannelProvisioningResult",
    "ChannelRef",
    "DirectoryOrganizationRecord",
    "DirectoryUserRecord",
    "IdentityOrganization",
    "IdentityProvisioningResult",
    "IdentityUser",
    "LogoImage",
    "PermissionGrant",
    "QuoteReceipt",
    "RegistrationForm",
    "RegistrationResult",
    "RoleRef",
    "WebhookApp",
    "WelcomeMessage",
]
