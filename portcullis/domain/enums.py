"""Domain enumerations for client onboarding.

Enums represent fixed sets of domain values (workflow stages, billing
customer types, channel permissions).
"""

from enum import Enum


class WorkflowStage(str, Enum):
    """Registration workflow progression.

    Stages are reached in declaration order; a failed run stops at the
    stage whose step raised. There is no rollback transition.
    """

    RECEIVED = "received"
    VALIDATED = "validated"
    IDENTITY_CREATED = "identity_created"
    ORGANIZATION_CREATED = "organization_created"
    WEBHOOK_APP_CREATED = "webhook_app_created"
    DIRECTORY_PERSISTED = "directory_persisted"
    CHANNEL_PROVISIONED = "channel_provisioned"
    CUSTOMER_CREATED = "customer_created"
    QUOTE_CREATED = "quote_created"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        """Human-readable stage name for operator-facing messages."""
        return self.value.replace("_", " ")

    @property
    def action(self) -> str:
        """The step that reaches this stage, e.g. "creating customer"."""
        return _STAGE_ACTIONS.get(self.value, self.label)


_STAGE_ACTIONS = {
    "identity_created": "creating user",
    "organization_created": "creating organization",
    "webhook_app_created": "creating webhook app",
    "directory_persisted": "saving directory records",
    "channel_provisioned": "setting up channel",
    "customer_created": "creating customer",
    "quote_created": "creating quote",
}


class CustomerType(str, Enum):
    """Billing customer type."""

    CORPORATE = "corporate"
    PERSON = "person"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid customer types as strings."""
        return [member.value for member in cls]


class Currency(str, Enum):
    """Currencies offered by the billing commands."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"

    @classmethod
    def values(cls) -> list[str]:
        """Return all supported currency codes as strings."""
        return [member.value for member in cls]


class OverwriteTarget(str, Enum):
    """Kind of principal a channel permission overwrite applies to."""

    ROLE = "role"
    MEMBER = "member"


class ChannelPermission(str, Enum):
    """Channel permissions granted or denied by onboarding overwrites.

    Values match discord.py PermissionOverwrite attribute names.
    """

    VIEW_CHANNEL = "view_channel"
    SEND_MESSAGES = "send_messages"
    MANAGE_CHANNELS = "manage_channels"
