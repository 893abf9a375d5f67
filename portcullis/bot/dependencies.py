"""Composition root: builds platform clients, repository and services once per process.

Chat-side services depend on the guild of the triggering interaction and
are built per interaction from a guild gateway.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from portcullis.application.interfaces.services import IGuildGateway
from portcullis.application.use_cases.billing.provision_billing import (
    BillingProvisioningService,
)
from portcullis.application.use_cases.channels.provision_channel import (
    ChannelProvisioningService,
)
from portcullis.application.use_cases.identity.provision_identity import (
    IdentityProvisioningService,
)
from portcullis.application.use_cases.onboarding.register_client import RegistrationWorkflow
from portcullis.application.use_cases.webhooks.provision_webhook_app import (
    WebhookAppProvisioningService,
)
from portcullis.core.config import Settings
from portcullis.infrastructure.external import (
    ClerkIdentityPlatform,
    HyperlineBillingPlatform,
    LogoDevClient,
    SvixWebhookPlatform,
    create_http_client,
)
from portcullis.infrastructure.persistence.database import dispose_engine, get_session_factory
from portcullis.infrastructure.persistence.repositories import DirectoryRepository


@dataclass
class ServiceContainer:
    """Process-wide services shared by every interaction."""

    settings: Settings
    http_client: httpx.AsyncClient
    identity: IdentityProvisioningService
    webhooks: WebhookAppProvisioningService
    billing: BillingProvisioningService

    def channel_service(self, gateway: IGuildGateway) -> ChannelProvisioningService:
        return ChannelProvisioningService(gateway, operator_user_id=self.settings.operator_user_id)

    def registration_workflow(self, gateway: IGuildGateway) -> RegistrationWorkflow:
        return RegistrationWorkflow(
            identity=self.identity,
            webhooks=self.webhooks,
            channels=self.channel_service(gateway),
            billing=self.billing,
            currency=self.settings.default_currency,
            unit_price=self.settings.quote_unit_price,
        )

    async def aclose(self) -> None:
        """Close the shared HTTP client and the database pool."""
        await self.http_client.aclose()
        await dispose_engine()


def build_container(settings: Settings) -> ServiceContainer:
    """Wire platform clients and services from settings."""
    http_client = create_http_client(settings.http_timeout_seconds)
    directory_repo = DirectoryRepository(get_session_factory())
    identity = IdentityProvisioningService(
        identity_platform=ClerkIdentityPlatform(
            http_client, settings.clerk_api_url, settings.clerk_secret_key.get_secret_value()
        ),
        logo_provider=LogoDevClient(
            http_client, settings.logo_api_url, settings.logo_dev_token.get_secret_value()
        ),
        directory_repo=directory_repo,
    )
    webhooks = WebhookAppProvisioningService(
        SvixWebhookPlatform(
            http_client, settings.svix_api_url, settings.svix_api_key.get_secret_value()
        )
    )
    billing = BillingProvisioningService(
        billing_platform=HyperlineBillingPlatform(
            http_client, settings.hyperline_api_url, settings.hyperline_api_key.get_secret_value()
        ),
        directory_repo=directory_repo,
    )
    return ServiceContainer(
        settings=settings,
        http_client=http_client,
        identity=identity,
        webhooks=webhooks,
        billing=billing,
    )
