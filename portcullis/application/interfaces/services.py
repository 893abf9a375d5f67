"""Platform interfaces (ports) for the application layer.

Protocols define the contracts of the external collaborators the
provisioning workflow drives: identity, logo, billing and webhook
platforms, and the chat server (guild) gateway. Implementations raise
PlatformValidationException for rejected payloads and
PlatformTransportException for network or server failures.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from portcullis.application.dtos.billing import QuoteReceipt
    from portcullis.application.dtos.channel import (
        ChannelRef,
        PermissionGrant,
        RoleRef,
        WelcomeMessage,
    )
    from portcullis.application.dtos.identity import LogoImage


# Identity platform interface
class IIdentityPlatform(Protocol):
    """Protocol for the identity/organization platform."""

    async def create_user(
        self,
        email: str,
        first_name: str,
        last_name: str,
        public_metadata: dict[str, Any],
    ) -> str:
        """Create a user; return its platform id."""

    async def create_organization(
        self,
        name: str,
        slug: str,
        created_by: str,
        public_metadata: dict[str, Any],
    ) -> str:
        """Create an organization owned by created_by; return its platform id."""

    async def update_organization_logo(
        self, organization_id: str, logo: LogoImage, uploader_user_id: str
    ) -> None:
        """Upload the organization's logo image."""


# Logo provider interface
class ILogoProvider(Protocol):
    """Protocol for fetching a logo image by web domain."""

    async def fetch_logo(self, domain: str) -> LogoImage:
        """Return the logo for domain; raise on any failure (never an empty image)."""


# Billing platform interface
class IBillingPlatform(Protocol):
    """Protocol for the billing platform (customers and quotes)."""

    async def create_customer(
        self,
        name: str,
        customer_type: str,
        currency: str,
        billing_email: str,
    ) -> str | None:
        """Create a customer; return its id, or None when the platform returned none."""

    async def create_quote(
        self,
        customer_id: str,
        amount: int,
        currency: str,
        expires_at: datetime,
    ) -> QuoteReceipt:
        """Create a quote for customer_id (amount in minor units)."""


# Webhook platform interface
class IWebhookAppPlatform(Protocol):
    """Protocol for the webhook-delivery platform."""

    async def create_app(self, name: str, description: str) -> str:
        """Create an application; return its id."""


# Chat server gateway interface
class IGuildGateway(Protocol):
    """Protocol for the chat server the bot provisions into (one guild).

    Built per interaction from the event's guild and the bot's identity,
    so test doubles can stand in for the live client.
    """

    @property
    def everyone_role_id(self) -> int:
        """Id of the implicit role every member has."""

    @property
    def bot_user_id(self) -> int:
        """Id of the bot's own account."""

    async def find_role(self, name: str) -> RoleRef | None:
        """Return the first role named exactly name, or None."""

    async def count_roles(self, name: str) -> int:
        """Return how many roles are named exactly name."""

    async def create_role(self, name: str, color: int) -> RoleRef:
        """Create a role."""

    async def create_private_channel(
        self, name: str, grants: list[PermissionGrant]
    ) -> ChannelRef:
        """Create a text channel with the given overwrites (applied in order)."""

    async def add_role_to_member(self, member_id: int, role: RoleRef) -> None:
        """Grant role to the member."""

    async def send_message(self, channel: ChannelRef, message: WelcomeMessage) -> None:
        """Post message (as an embed) into channel."""
