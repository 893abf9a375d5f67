"""DTOs for billing provisioning."""

from dataclasses import dataclass
from datetime import datetime

from portcullis.domain.enums import CustomerType


@dataclass(frozen=True)
class BillingCustomer:
    """Customer created in the billing platform, linked to a directory organization."""

    id: str
    name: str
    customer_type: CustomerType
    currency: str
    billing_email: str
    organization_id: str


@dataclass(frozen=True)
class QuoteReceipt:
    """What the billing platform returns for a created quote."""

    id: str | None
    status: str | None
    hosted_url: str | None


@dataclass(frozen=True)
class BillingQuote:
    """Quote for a customer. amount is in minor currency units (e.g. cents)."""

    id: str | None
    customer_id: str
    amount: int
    currency: str
    expires_at: datetime
    status: str | None
    hosted_url: str | None

    @property
    def display_amount(self) -> str:
        """Amount in major units with two decimals and upper-case currency (e.g. '1250.00 USD')."""
        return f"{self.amount / 100:.2f} {self.currency.upper()}"
