"""Interaction handlers: one per command or form, each ending in exactly one reply.

Handlers take an InteractionResponder and already-built services so they
can run without a live gateway connection.
"""

from __future__ import annotations

from collections.abc import Callable

from portcullis.application.dtos.onboarding import RegistrationForm
from portcullis.application.services.submission_validator import validate_submission
from portcullis.application.use_cases.billing.provision_billing import (
    BillingProvisioningService,
)
from portcullis.application.use_cases.identity.provision_identity import (
    IdentityProvisioningService,
)
from portcullis.application.use_cases.onboarding.register_client import RegistrationWorkflow
from portcullis.bot import replies
from portcullis.bot.embeds import customer_embed, quote_embed
from portcullis.bot.responder import InteractionResponder
from portcullis.domain.enums import CustomerType
from portcullis.domain.exceptions import InputValidationException, OnboardingException
from portcullis.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _log_failure(action: str, exc: Exception) -> None:
    if isinstance(exc, OnboardingException):
        logger.warning("%s failed: error_code=%s message=%s", action, exc.error_code, exc.message)
    else:
        logger.exception("%s failed unexpectedly: %s", action, exc)


async def handle_registration_submit(
    responder: InteractionResponder,
    form: RegistrationForm,
    member_id: int,
    build_workflow: Callable[[], RegistrationWorkflow],
) -> None:
    """Validate the registration form, run the workflow, reply once.

    Invalid input is answered directly (no defer, no platform call).
    """
    try:
        submission = validate_submission(form)
    except InputValidationException as exc:
        logger.info("Registration form rejected: member=%s errors=%s", member_id, exc.messages)
        await responder.send(replies.render_error(exc, replies.REGISTRATION_ERROR))
        return

    await responder.defer()
    try:
        result = await build_workflow().run(submission, member_id)
    except Exception as exc:
        _log_failure("Registration", exc)
        await responder.send(replies.render_error(exc, replies.REGISTRATION_ERROR))
        return
    await responder.send(replies.registration_complete(result.channel.channel))


async def handle_create_user(
    responder: InteractionResponder,
    identity: IdentityProvisioningService,
    *,
    email: str,
    first_name: str,
    last_name: str,
    domain: str,
    member_id: int,
    organization: str | None = None,
) -> None:
    """Create an identity user (and optional organization) and mirror it to the directory."""
    await responder.defer()
    email = email.strip()
    try:
        result = await identity.create_user(
            email=email,
            external_user_id=str(member_id),
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            domain=domain.strip(),
            organization_name=(organization or "").strip() or None,
        )
    except Exception as exc:
        _log_failure("Create user", exc)
        await responder.send(replies.render_error(exc, replies.CREATE_USER_ERROR))
        return
    await responder.send(
        replies.user_created(result, email, result.user.first_name, result.user.last_name)
    )


async def handle_create_customer(
    responder: InteractionResponder,
    billing: BillingProvisioningService,
    *,
    name: str,
    customer_type: str,
    currency: str,
    email: str,
    organization_id: str,
) -> None:
    """Create a billing customer for a directory organization."""
    await responder.defer()
    try:
        customer = await billing.create_customer(
            name=name.strip(),
            customer_type=CustomerType(customer_type),
            currency=currency.upper(),
            billing_email=email.strip(),
            directory_org_id=organization_id.strip(),
        )
    except Exception as exc:
        _log_failure("Create customer", exc)
        await responder.send(replies.render_error(exc, replies.CREATE_CUSTOMER_ERROR))
        return
    await responder.send(embed=customer_embed(customer))


async def handle_create_quote(
    responder: InteractionResponder,
    billing: BillingProvisioningService,
    *,
    customer_id: str,
    amount: int,
    currency: str,
) -> None:
    """Create a 30-day quote; amount is in minor currency units."""
    await responder.defer()
    try:
        quote = await billing.create_quote(
            customer_id=customer_id.strip(),
            amount=amount,
            currency=currency.upper(),
        )
    except Exception as exc:
        _log_failure("Create quote", exc)
        await responder.send(replies.render_error(exc, replies.CREATE_QUOTE_ERROR))
        return
    await responder.send(embed=quote_embed(quote))
