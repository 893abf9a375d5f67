"""Domain value objects for client onboarding.

Value objects are immutable types that represent domain concepts. A
Submission only exists after the registration form has been validated
(see SubmissionValidator); downstream code never re-parses raw fields.
"""

from dataclasses import dataclass

from portcullis.shared.utils.sanitization import contact_email, welcome_channel_name


@dataclass(frozen=True)
class Submission:
    """A validated registration: who is registering, for which organization, at what size."""

    first_name: str
    last_name: str
    organization: str
    domain: str
    usage_metric: int

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def contact_email(self) -> str:
        """Contact address used for the identity user and billing email."""
        return contact_email(self.first_name, self.last_name, self.domain)

    @property
    def channel_name(self) -> str:
        return welcome_channel_name(self.organization)
