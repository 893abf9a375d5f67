"""ID and secret generators (organization API keys)."""

import secrets

from portcullis.core.constants import (
    API_KEY_FALLBACK_SLUG,
    API_KEY_PREFIX,
    API_KEY_RANDOM_BYTES,
)
from portcullis.shared.utils.sanitization import slugify


def generate_api_key(organization_name: str) -> str:
    """Generate a non-guessable organization API key.

    Format is ``pk_<org-slug>_<base64url>`` where the random part is
    32 bytes from the OS CSPRNG, base64url-encoded without padding
    (43 characters). Keys never expire. Names with no ASCII letters or
    digits (e.g. ``"!!!"``) use the slug ``org``.

    Args:
        organization_name: Display name of the organization.

    Returns:
        The new API key.
    """
    org_slug = slugify(organization_name) or API_KEY_FALLBACK_SLUG
    token = secrets.token_urlsafe(API_KEY_RANDOM_BYTES)
    return f"{API_KEY_PREFIX}_{org_slug}_{token}"
