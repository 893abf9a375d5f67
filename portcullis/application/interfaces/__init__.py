"""Application interfaces (ports): repository and platform protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from portcullis.infrastructure or portcullis.bot.
"""

from portcullis.application.interfaces.repositories import IDirectoryRepository
from portcullis.application.interfaces.services import (
    IBillingPlatform,
    IGuildGateway,
    IIdentityPlatform,
    ILogoProvider,
    IWebhookAppPlatform,
)

__all__ = [
    "IBillingPlatform",
    "IDirectoryRepository",
    "IGuildGateway",
    "IIdentityPlatform",
    "ILogoProvider",
    "IWebhookAppPlatform",
]
