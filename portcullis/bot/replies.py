"""User-visible reply texts and the exception-to-reply mapping.

Every handler turns a failure into exactly one reply through render_error,
the bot's counterpart of HTTP exception handlers.
"""

from portcullis.application.dtos.channel import ChannelRef
from portcullis.application.dtos.identity import IdentityProvisioningResult
from portcullis.domain.exceptions import (
    ChannelProvisioningException,
    InputValidationException,
    PartialCompletionException,
    PlatformTransportException,
    PlatformValidationException,
    ResourceNotFoundException,
)

REGISTRATION_ERROR = "There was an error processing your registration. Please try again."
CREATE_USER_ERROR = "There was an error creating the user. Please try again."
CREATE_CUSTOMER_ERROR = "There was an error creating the customer. Please try again."
CREATE_QUOTE_ERROR = "There was an error creating the quote. Please try again."
GENERIC_ERROR = "There was an error processing your request."
REGISTRATION_FORM_ERROR = "Error showing registration form"
GUILD_ONLY = "This can only be used inside the server."
TRANSPORT_RETRY = "We couldn't reach one of our services. Please try again in a few minutes."


def registration_complete(channel: ChannelRef) -> str:
    return f"Registration complete! Please check {channel.mention}"


def user_created(
    result: IdentityProvisioningResult, email: str, first_name: str, last_name: str
) -> str:
    """Summary for /create-user: identity ids and, with an organization, its API key."""
    lines = [
        "✅ User created successfully!",
        f"Email: {email}",
        f"Name: {first_name} {last_name}",
        f"Clerk ID: {result.user.id}",
    ]
    if result.organization is not None:
        lines.append(f"Organization ID: {result.organization.id}")
        lines.append(f"API Key: {result.organization.api_key}")
    return "\n".join(lines)


def _input_errors(exc: InputValidationException) -> str:
    return "Please fix the following:\n" + "\n".join(f"• {msg}" for msg in exc.messages)


def _partial_completion(exc: PartialCompletionException, fallback: str) -> str:
    lines = [fallback, f"Failed at: {exc.stage.action}."]
    if isinstance(exc.cause, PlatformValidationException):
        lines.append(f"❌ {exc.cause.message}")
    if exc.channel is not None:
        lines.append(f"Your channel was created: {exc.channel.mention}")
    return "\n".join(lines)


def render_error(exc: Exception, fallback: str = GENERIC_ERROR) -> str:
    """Map an exception to the single reply shown to the user.

    Args:
        exc: The failure raised by a handler's use case.
        fallback: Context-specific text for failures without a dedicated message.

    Returns:
        Reply text.
    """
    if isinstance(exc, InputValidationException):
        return _input_errors(exc)
    if isinstance(exc, PartialCompletionException):
        return _partial_completion(exc, fallback)
    if isinstance(exc, PlatformValidationException):
        return f"❌ {exc.message}"
    if isinstance(exc, PlatformTransportException):
        return TRANSPORT_RETRY
    if isinstance(exc, ResourceNotFoundException):
        resource = str(exc.details["resource_type"]).capitalize()
        return f"❌ {resource} not found: {exc.details['resource_id']}"
    if isinstance(exc, ChannelProvisioningException) and exc.channel is not None:
        return f"{fallback}\nYour channel was created: {exc.channel.mention}"
    return fallback
