"""Domain exceptions for the onboarding bot.

Defines the failure taxonomy of the provisioning workflow. These exceptions
are independent of the chat transport; the bot layer maps them to replies
in portcullis.bot.replies.
"""

from typing import Any

from portcullis.domain.enums import WorkflowStage


class OnboardingException(Exception):
    """Base exception for all onboarding errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, platform, stage).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class InputValidationException(OnboardingException):
    """Raised when submitted form fields fail validation (no platform call is made).

    Carries one message per failing field, in form order.
    """

    def __init__(self, errors: list[tuple[str, str]]) -> None:
        """Initialize with (field, message) pairs.

        Args:
            errors: Non-empty list of (field name, human-readable message).
        """
        self.errors = list(errors)
        super().__init__(
            "Submitted form is invalid",
            "INPUT_ERROR",
            {"errors": [{"field": field, "message": msg} for field, msg in self.errors]},
        )

    @property
    def messages(self) -> list[str]:
        """Per-field messages without field names."""
        return [msg for _, msg in self.errors]


class ResourceNotFoundException(OnboardingException):
    """Raised when a required record is missing (e.g. directory organization)."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class PlatformValidationException(OnboardingException):
    """Raised when a downstream platform rejects the payload (e.g. duplicate email).

    message is the platform's own message so it can be shown verbatim.
    """

    def __init__(
        self,
        platform: str,
        message: str,
        status_code: int | None = None,
        platform_code: str | None = None,
    ) -> None:
        details: dict[str, Any] = {"platform": platform}
        if status_code is not None:
            details["status_code"] = status_code
        if platform_code:
            details["platform_code"] = platform_code
        super().__init__(message, "PLATFORM_VALIDATION_ERROR", details)

    @property
    def platform(self) -> str:
        return self.details["platform"]


class PlatformTransportException(OnboardingException):
    """Raised on network failures or 5xx/unexpected responses from a platform."""

    def __init__(
        self, platform: str, reason: str, status_code: int | None = None
    ) -> None:
        details: dict[str, Any] = {"platform": platform, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            f"Request to {platform} failed",
            "TRANSPORT_ERROR",
            details,
        )

    @property
    def platform(self) -> str:
        return self.details["platform"]


class ProvisioningException(OnboardingException):
    """Raised when a platform call completed but produced no usable record."""

    def __init__(self, platform: str, message: str) -> None:
        super().__init__(message, "PROVISIONING_ERROR", {"platform": platform})


class DirectoryPersistenceException(OnboardingException):
    """Raised when an upsert into the directory store fails."""

    def __init__(self, entity_type: str, entity_id: str, message: str) -> None:
        super().__init__(
            message,
            "DIRECTORY_PERSISTENCE_ERROR",
            {"entity_type": entity_type, "entity_id": entity_id},
        )


class ChannelProvisioningException(OnboardingException):
    """Raised when a chat-side provisioning step fails.

    channel is set when the private channel was already created, so the
    caller can still point the submitter at it.
    """

    def __init__(
        self,
        step: str,
        reason: str,
        channel: Any | None = None,
        role: Any | None = None,
    ) -> None:
        self.channel = channel
        self.role = role
        details: dict[str, Any] = {"step": step, "reason": reason}
        if channel is not None:
            details["channel_id"] = channel.id
        if role is not None:
            details["role_id"] = role.id
        super().__init__(
            f"Channel provisioning failed at {step}",
            "CHANNEL_PROVISIONING_ERROR",
            details,
        )


class PartialCompletionException(OnboardingException):
    """Raised when a stage fails after earlier stages committed durable records.

    No compensation is attempted; details carry enough context (failing stage,
    committed stages, record ids) for an operator to reconcile by hand.
    """

    def __init__(
        self,
        stage: WorkflowStage,
        cause: Exception,
        committed: list[WorkflowStage],
        records: dict[str, str] | None = None,
        channel: Any | None = None,
    ) -> None:
        self.stage = stage
        self.cause = cause
        self.committed = list(committed)
        self.channel = channel
        cause_message = getattr(cause, "message", None) or str(cause) or type(cause).__name__
        super().__init__(
            f"Registration failed at stage '{stage.label}' after partial completion: {cause_message}",
            "PARTIAL_COMPLETION",
            {
                "stage": stage.value,
                "committed": [s.value for s in self.committed],
                "cause_code": getattr(cause, "error_code", type(cause).__name__),
                "cause": cause_message,
                "records": dict(records or {}),
            },
        )
