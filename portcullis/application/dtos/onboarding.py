"""DTOs for the registration workflow."""

from dataclasses import dataclass, field

from portcullis.application.dtos.billing import BillingCustomer, BillingQuote
from portcullis.application.dtos.channel import ChannelProvisioningResult
from portcullis.application.dtos.identity import IdentityOrganization, IdentityUser
from portcullis.application.dtos.webhook import WebhookApp
from portcullis.domain.enums import WorkflowStage


@dataclass(frozen=True)
class RegistrationForm:
    """Raw registration modal fields, exactly as typed by the client."""

    first_name: str
    last_name: str
    organization: str
    domain: str
    usage_metric: str


@dataclass(frozen=True)
class RegistrationResult:
    """Everything a completed registration created, in creation order."""

    user: IdentityUser
    organization: IdentityOrganization
    webhook_app: WebhookApp
    channel: ChannelProvisioningResult
    customer: BillingCustomer
    quote: BillingQuote
    stages: tuple[WorkflowStage, ...] = field(default_factory=tuple)
