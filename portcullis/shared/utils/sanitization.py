"""Name derivation helpers for slugs, channel names and contact emails."""

import re

from portcullis.core.constants import WELCOME_CHANNEL_SUFFIX

_NON_CHANNEL_CHAR_RE = re.compile(r"[^a-z0-9]")
_NON_SLUG_CHAR_RE = re.compile(r"[^a-z0-9]+")
_WHITESPACE_RE = re.compile(r"\s+")


def organization_slug(name: str) -> str:
    """Identity-platform slug: lowercased name with each space replaced by '-'."""
    return name.strip().lower().replace(" ", "-")


def slugify(value: str) -> str:
    """Collapse runs of non-alphanumerics to single hyphens (e.g. 'Acme Corp!' -> 'acme-corp')."""
    return _NON_SLUG_CHAR_RE.sub("-", value.lower()).strip("-")


def welcome_channel_name(organization_label: str) -> str:
    """Derive the private welcome channel name for an organization.

    Every character outside ``[a-z0-9]`` (after lowercasing) becomes ``-``,
    one for one, so the mapping is total and deterministic. The result
    always ends with ``-welcome``.

    Args:
        organization_label: Organization name as entered by the client.

    Returns:
        Channel name, e.g. ``acme-corp-welcome`` for ``Acme Corp``.
    """
    base = _NON_CHANNEL_CHAR_RE.sub("-", organization_label.lower())
    return f"{base}{WELCOME_CHANNEL_SUFFIX}"


def contact_email(first_name: str, last_name: str, domain: str) -> str:
    """Build the registration contact address ``first.last@domain`` (lowercase, no whitespace)."""
    local = ".".join(
        _WHITESPACE_RE.sub("", part).lower() for part in (first_name, last_name)
    )
    return f"{local}@{_WHITESPACE_RE.sub('', domain).lower()}"
