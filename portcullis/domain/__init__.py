"""Domain layer: value objects, enums, and exceptions.

No dependencies on infrastructure or the chat transport. Used by
application, infrastructure and bot layers.
"""

from portcullis.domain.enums import (
    ChannelPermission,
    Currency,
    CustomerType,
    OverwriteTarget,
    WorkflowStage,
)
from portcullis.domain.exceptions import (
    ChannelProvisioningException,
    DirectoryPersistenceException,
    InputValidationException,
    OnboardingException,
    PartialCompletionException,
    PlatformTransportException,
    PlatformValidationException,
    ProvisioningException,
    ResourceNotFoundException,
)
from portcullis.domain.value_objects import Submission

__all__ = [
    # Enums
    "ChannelPermission",
    "Currency",
    "CustomerType",
    "OverwriteTarget",
    "WorkflowStage",
    # Exceptions
    "ChannelProvisioningException",
    "DirectoryPersistenceException",
    "InputValidationException",
    "OnboardingException",
    "PartialCompletionException",
    "PlatformTransportException",
    "PlatformValidationException",
    "ProvisioningException",
    "ResourceNotFoundException",
    # Value objects
    "Submission",
]
