"""Application services (pure helpers used by use cases)."""

from portcullis.application.services.submission_validator import (
    parse_usage_metric,
    validate_submission,
)

__all__ = ["parse_usage_metric", "validate_submission"]
