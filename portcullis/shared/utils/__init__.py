"""Shared utilities: datetime, generators, name derivation."""

from portcullis.shared.utils.datetime import ensure_utc, to_iso_utc, utc_now
from portcullis.shared.utils.generators import generate_api_key
from portcullis.shared.utils.sanitization import (
    contact_email,
    organization_slug,
    slugify,
    welcome_channel_name,
)

__all__ = [
    "generate_api_key",
    "utc_now",
    "ensure_utc",
    "to_iso_utc",
    "contact_email",
    "organization_slug",
    "slugify",
    "welcome_channel_name",
]
