"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from portcullis.application.dtos.directory import (
        DirectoryOrganizationRecord,
        DirectoryUserRecord,
    )


# Directory repository interface
class IDirectoryRepository(Protocol):
    """Protocol for the denormalized directory store (users and organizations).

    Each write runs in its own transaction; there is no linkage between
    the user and organization upserts.
    """

    async def upsert_user(self, record: DirectoryUserRecord) -> None:
        """Insert or overwrite the user row with the same id (last write wins)."""

    async def upsert_organization(self, record: DirectoryOrganizationRecord) -> None:
        """Insert or overwrite the organization row with the same id (last write wins)."""

    async def get_user(self, user_id: str) -> DirectoryUserRecord | None:
        """Return the user row, or None."""

    async def get_organization(self, organization_id: str) -> DirectoryOrganizationRecord | None:
        """Return the organization row, or None."""

    async def link_billing_customer(self, organization_id: str, customer_id: str) -> bool:
        """Store the billing customer id on the organization row. Returns False when no row matched."""
