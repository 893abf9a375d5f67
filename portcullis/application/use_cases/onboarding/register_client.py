"""Client registration workflow (multi-platform provisioning orchestrator).

Drives one validated Submission through the platforms in a fixed order:

    Validated -> IdentityCreated -> OrganizationCreated -> WebhookAppCreated
    -> DirectoryPersisted -> ChannelProvisioned -> CustomerCreated
    -> QuoteCreated -> Completed

Each step runs only after every earlier step succeeded. The first failure
stops the run. There is no rollback: records committed by earlier steps
stay in place and the failure is reported with enough context (failing
stage, committed stages, record ids, channel) for manual reconciliation.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from portcullis.application.dtos.billing import BillingCustomer, BillingQuote
from portcullis.application.dtos.channel import ChannelProvisioningResult, ChannelRef
from portcullis.application.dtos.identity import IdentityOrganization, IdentityUser
from portcullis.application.dtos.onboarding import RegistrationResult
from portcullis.application.dtos.webhook import WebhookApp
from portcullis.application.use_cases.billing.provision_billing import (
    BillingProvisioningService,
)
from portcullis.application.use_cases.channels.provision_channel import (
    ChannelProvisioningService,
    build_welcome_message,
)
from portcullis.application.use_cases.identity.provision_identity import (
    IdentityProvisioningService,
)
from portcullis.application.use_cases.webhooks.provision_webhook_app import (
    WebhookAppProvisioningService,
)
from portcullis.core.constants import QUOTE_UNIT_PRICE
from portcullis.domain.enums import CustomerType, WorkflowStage
from portcullis.domain.exceptions import PartialCompletionException
from portcullis.domain.value_objects.core import Submission
from portcullis.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


@dataclass
class RegistrationRun:
    """Mutable state of one workflow run (never shared between submissions)."""

    submission: Submission
    member_id: int
    stages: list[WorkflowStage] = field(
        default_factory=lambda: [WorkflowStage.RECEIVED, WorkflowStage.VALIDATED]
    )
    user: IdentityUser | None = None
    organization: IdentityOrganization | None = None
    webhook_app: WebhookApp | None = None
    channel: ChannelProvisioningResult | None = None
    customer: BillingCustomer | None = None
    quote: BillingQuote | None = None

    @property
    def committed(self) -> list[WorkflowStage]:
        """Stages whose step left a durable record on some platform."""
        return [
            s for s in self.stages if s not in (WorkflowStage.RECEIVED, WorkflowStage.VALIDATED)
        ]

    def records(self) -> dict[str, str]:
        """Ids of everything created so far (for operator reconciliation)."""
        out: dict[str, str] = {}
        if self.user is not None:
            out["user_id"] = self.user.id
        if self.organization is not None:
            out["organization_id"] = self.organization.id
        if self.webhook_app is not None:
            out["webhook_app_id"] = self.webhook_app.id
        if self.channel is not None:
            out["channel_id"] = str(self.channel.channel.id)
            out["role_id"] = str(self.channel.role.id)
        if self.customer is not None:
            out["customer_id"] = self.customer.id
        return out


Step = Callable[[RegistrationRun], Awaitable[None]]


class RegistrationWorkflow:
    """Runs the registration stages in order and surfaces the first fatal error."""

    def __init__(
        self,
        identity: IdentityProvisioningService,
        webhooks: WebhookAppProvisioningService,
        channels: ChannelProvisioningService,
        billing: BillingProvisioningService,
        currency: str = "USD",
        unit_price: int = QUOTE_UNIT_PRICE,
    ) -> None:
        self.identity = identity
        self.webhooks = webhooks
        self.channels = channels
        self.billing = billing
        self.currency = currency
        self.unit_price = unit_price

    def steps(self) -> list[tuple[WorkflowStage, Step]]:
        """The ordered (stage reached on success, step) sequence."""
        return [
            (WorkflowStage.IDENTITY_CREATED, self._create_identity_user),
            (WorkflowStage.ORGANIZATION_CREATED, self._create_identity_organization),
            (WorkflowStage.WEBHOOK_APP_CREATED, self._create_webhook_app),
            (WorkflowStage.DIRECTORY_PERSISTED, self._persist_directory),
            (WorkflowStage.CHANNEL_PROVISIONED, self._provision_channel),
            (WorkflowStage.CUSTOMER_CREATED, self._create_customer),
            (WorkflowStage.QUOTE_CREATED, self._create_quote),
        ]

    async def run(self, submission: Submission, member_id: int) -> RegistrationResult:
        """Provision everything for submission on behalf of member_id.

        Raises:
            OnboardingException (or the raw error) when the first step fails,
            since nothing was committed yet.
            PartialCompletionException: A later step failed after earlier
                steps committed records.
        """
        run = RegistrationRun(submission=submission, member_id=member_id)
        for stage, step in self.steps():
            try:
                await step(run)
            except Exception as exc:
                self._fail(run, stage, exc)
            run.stages.append(stage)
            logger.debug("Registration stage reached: %s org=%r", stage.value, submission.organization)
        run.stages.append(WorkflowStage.COMPLETED)
        logger.info(
            "Registration completed: org=%r domain=%s records=%s",
            submission.organization,
            submission.domain,
            run.records(),
        )
        return RegistrationResult(
            user=run.user,
            organization=run.organization,
            webhook_app=run.webhook_app,
            channel=run.channel,
            customer=run.customer,
            quote=run.quote,
            stages=tuple(run.stages),
        )

    def _fail(self, run: RegistrationRun, stage: WorkflowStage, exc: Exception) -> None:
        """Raise the surfaced error for a failed step (never returns)."""
        committed = run.committed
        channel: ChannelRef | None = (
            run.channel.channel if run.channel is not None else getattr(exc, "channel", None)
        )
        logger.error(
            "Registration failed: stage=%s committed=%s error_code=%s error=%s records=%s",
            stage.value,
            [s.value for s in committed],
            getattr(exc, "error_code", type(exc).__name__),
            exc,
            run.records(),
        )
        if not committed:
            raise exc
        raise PartialCompletionException(
            stage=stage,
            cause=exc,
            committed=committed,
            records=run.records(),
            channel=channel,
        ) from exc

    async def _create_identity_user(self, run: RegistrationRun) -> None:
        s = run.submission
        run.user = await self.identity.register_user(
            email=s.contact_email,
            external_user_id=str(run.member_id),
            first_name=s.first_name,
            last_name=s.last_name,
            domain=s.domain,
        )

    async def _create_identity_organization(self, run: RegistrationRun) -> None:
        run.organization = await self.identity.register_organization(
            name=run.submission.organization,
            created_by=run.user.id,
            domain=run.submission.domain,
        )

    async def _create_webhook_app(self, run: RegistrationRun) -> None:
        run.webhook_app = await self.webhooks.create_app(run.submission.organization)

    async def _persist_directory(self, run: RegistrationRun) -> None:
        await self.identity.persist_organization(
            run.organization,
            domain=run.submission.domain,
            webhook_app_id=run.webhook_app.id,
        )
        await self.identity.persist_user(run.user, organization_id=run.organization.id)

    async def _provision_channel(self, run: RegistrationRun) -> None:
        s = run.submission
        run.channel = await self.channels.provision_channel(
            domain=s.domain,
            organization_label=s.organization,
            granted_member_id=run.member_id,
            welcome=build_welcome_message(s),
        )

    async def _create_customer(self, run: RegistrationRun) -> None:
        s = run.submission
        run.customer = await self.billing.create_customer(
            name=s.organization,
            customer_type=CustomerType.CORPORATE,
            currency=self.currency,
            billing_email=s.contact_email,
            directory_org_id=run.organization.id,
        )

    async def _create_quote(self, run: RegistrationRun) -> None:
        run.quote = await self.billing.create_quote(
            customer_id=run.customer.id,
            amount=self.unit_price * run.submission.usage_metric,
            currency=self.currency,
        )
