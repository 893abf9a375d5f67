"""DTOs for the directory store (denormalized copies of identity records)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryUserRecord:
    """Row in the users table, keyed by identity-platform user id."""

    id: str
    email: str
    discord_user_id: str
    first_name: str
    last_name: str
    domain: str
    organization: str = ""


@dataclass(frozen=True)
class DirectoryOrganizationRecord:
    """Row in the organizations table, keyed by identity-platform organization id."""

    id: str
    created_by: str
    organization_name: str
    api_key: str
    domain: str | None = None
    webhook_app_id: str | None = None
    hyperline_id: str | None = None
