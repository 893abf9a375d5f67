"""Onboarding (registration workflow) use cases."""

from portcullis.application.use_cases.onboarding.register_client import (
    RegistrationRun,
    RegistrationWorkflow,
)

__all__ = ["RegistrationRun", "RegistrationWorkflow"]
