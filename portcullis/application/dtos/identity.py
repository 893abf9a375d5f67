"""DTOs for identity provisioning (no dependency on the platform SDK or ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IdentityUser:
    """User created in the identity platform."""

    id: str
    email: str
    first_name: str
    last_name: str
    domain: str
    source: str
    external_user_id: str


@dataclass(frozen=True)
class IdentityOrganization:
    """Organization created in the identity platform, with its API key and logo source."""

    id: str
    name: str
    slug: str
    created_by: str
    api_key: str
    logo_url: str | None = None


@dataclass(frozen=True)
class IdentityProvisioningResult:
    """Result of create_user: the user and, when requested, its organization."""

    user: IdentityUser
    organization: IdentityOrganization | None = None


@dataclass(frozen=True)
class LogoImage:
    """Logo image fetched for a domain, ready to upload."""

    content: bytes
    content_type: str
    source_url: str
