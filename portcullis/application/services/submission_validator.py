"""Registration form validation.

Turns raw modal fields into a Submission, or reports every failing field.
Pure and synchronous: runs before any platform is contacted.
"""

import re

from portcullis.application.dtos.onboarding import RegistrationForm
from portcullis.core.constants import (
    ORGANIZATION_MAX_LENGTH,
    USAGE_METRIC_MAX,
    USAGE_METRIC_MIN,
)
from portcullis.domain.exceptions import InputValidationException
from portcullis.domain.value_objects.core import Submission

# ASCII digits only; int() alone would also accept '1_000' and non-ASCII digits.
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")

_REQUIRED_TEXT_FIELDS: tuple[tuple[str, str], ...] = (
    ("first_name", "First name"),
    ("last_name", "Last name"),
    ("organization", "Organization"),
    ("domain", "Domain"),
)


def parse_usage_metric(raw: str) -> int | None:
    """Parse a base-10 integer in [USAGE_METRIC_MIN, USAGE_METRIC_MAX]; None if invalid."""
    value = (raw or "").strip()
    if not _INTEGER_RE.match(value):
        return None
    number = int(value)
    if number < USAGE_METRIC_MIN or number > USAGE_METRIC_MAX:
        return None
    return number


def validate_submission(form: RegistrationForm) -> Submission:
    """Validate the registration form and build a Submission.

    Text fields must be non-empty after trimming (values are stored trimmed).
    The organization must fit in a welcome channel name (at most
    ORGANIZATION_MAX_LENGTH characters).
    The usage metric must be a whole number from 1 to 1,000,000,000.

    Args:
        form: Raw modal fields.

    Returns:
        The validated Submission.

    Raises:
        InputValidationException: With one message per failing field.
    """
    errors: list[tuple[str, str]] = []
    cleaned: dict[str, str] = {}
    for field, label in _REQUIRED_TEXT_FIELDS:
        value = (getattr(form, field) or "").strip()
        if not value:
            errors.append((field, f"{label} is required."))
        cleaned[field] = value

    if len(cleaned["organization"]) > ORGANIZATION_MAX_LENGTH:
        errors.append(
            (
                "organization",
                f"Organization must be at most {ORGANIZATION_MAX_LENGTH} characters.",
            )
        )

    usage_metric = parse_usage_metric(form.usage_metric)
    if usage_metric is None:
        errors.append(
            (
                "usage_metric",
                f"Table size must be a whole number between {USAGE_METRIC_MIN:,} "
                f"and {USAGE_METRIC_MAX:,}.",
            )
        )

    if errors:
        raise InputValidationException(errors)
    return Submission(usage_metric=usage_metric, **cleaned)
