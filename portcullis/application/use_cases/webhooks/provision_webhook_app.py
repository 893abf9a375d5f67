"""Webhook app provisioning: one webhook-delivery application per organization."""

from __future__ import annotations

from portcullis.application.dtos.webhook import WebhookApp
from portcullis.application.interfaces.services import IWebhookAppPlatform
from portcullis.domain.exceptions import ProvisioningException
from portcullis.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

WEBHOOK_PLATFORM = "svix"


class WebhookAppProvisioningService:
    """Creates the webhook app for an organization (single call, no retry)."""

    def __init__(self, webhook_platform: IWebhookAppPlatform) -> None:
        self.webhook_platform = webhook_platform

    async def create_app(self, organization_name: str) -> WebhookApp:
        """Create the app named after the organization.

        Any failure is logged with its detail and re-raised as a generic
        ProvisioningException; the underlying detail is not shown to users.
        """
        try:
            app_id = await self.webhook_platform.create_app(
                name=organization_name,
                description=f"App for {organization_name}",
            )
        except Exception as exc:
            logger.error("Error creating webhook app for %r: %s", organization_name, exc)
            raise ProvisioningException(WEBHOOK_PLATFORM, "Failed to create webhook app") from exc
        if not app_id:
            logger.error("Webhook app for %r returned no id", organization_name)
            raise ProvisioningException(WEBHOOK_PLATFORM, "Failed to create webhook app")
        logger.info("Webhook app created: id=%s organization=%r", app_id, organization_name)
        return WebhookApp(id=app_id, name=organization_name)
