"""Webhook app provisioning use cases."""

from portcullis.application.use_cases.webhooks.provision_webhook_app import (
    WebhookAppProvisioningService,
)

__all__ = ["WebhookAppProvisioningService"]
