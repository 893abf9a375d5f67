"""DTOs for webhook app provisioning."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WebhookApp:
    """Webhook-delivery application scoped to one organization."""

    id: str
    name: str
