"""Directory repository: upsert-only store of users and organizations.

Each operation opens its own session and transaction. Upserts are
INSERT ... ON CONFLICT (id) DO UPDATE, so the last write for an id wins.
"""

from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portcullis.application.dtos.directory import (
    DirectoryOrganizationRecord,
    DirectoryUserRecord,
)
from portcullis.domain.exceptions import DirectoryPersistenceException
from portcullis.infrastructure.persistence.database import Base
from portcullis.infrastructure.persistence.models.directory import (
    DirectoryOrganization,
    DirectoryUser,
)
from portcullis.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def build_upsert_statement(model: type[Base], values: dict[str, Any]) -> Any:
    """INSERT values; on primary-key conflict overwrite every supplied column."""
    stmt = pg_insert(model).values(**values)
    overwrite = {key: stmt.excluded[key] for key in values if key != "id"}
    overwrite["updated_at"] = func.now()
    return stmt.on_conflict_do_update(index_elements=["id"], set_=overwrite)


def _organization_values(record: DirectoryOrganizationRecord) -> dict[str, Any]:
    values: dict[str, Any] = {
        "id": record.id,
        "created_by": record.created_by,
        "organization_name": record.organization_name,
        "api_key": record.api_key,
        "domain": record.domain,
        "webhook_app_id": record.webhook_app_id,
    }
    # Leave an already linked billing customer in place when none is supplied.
    if record.hyperline_id is not None:
        values["hyperline_id"] = record.hyperline_id
    return values


def _user_values(record: DirectoryUserRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "email": record.email,
        "discord_user_id": record.discord_user_id,
        "organization": record.organization,
        "first_name": record.first_name,
        "last_name": record.last_name,
        "domain": record.domain,
    }


class DirectoryRepository:
    """SQLAlchemy implementation of IDirectoryRepository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def upsert_organization(self, record: DirectoryOrganizationRecord) -> None:
        stmt = build_upsert_statement(DirectoryOrganization, _organization_values(record))
        try:
            async with self._session_factory() as session, session.begin():
                await session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Organization upsert failed: id=%s error=%s", record.id, exc)
            raise DirectoryPersistenceException(
                "organization", record.id, "Failed to store organization data"
            ) from exc
        logger.info("Organization stored in directory: id=%s", record.id)

    async def upsert_user(self, record: DirectoryUserRecord) -> None:
        stmt = build_upsert_statement(DirectoryUser, _user_values(record))
        try:
            async with self._session_factory() as session, session.begin():
                await session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("User upsert failed: id=%s error=%s", record.id, exc)
            raise DirectoryPersistenceException(
                "user", record.id, "Failed to store user data"
            ) from exc
        logger.info("User stored in directory: id=%s", record.id)

    async def get_user(self, user_id: str) -> DirectoryUserRecord | None:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(DirectoryUser).where(DirectoryUser.id == user_id)
                )
                row = result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise DirectoryPersistenceException(
                "user", user_id, "Failed to read user data"
            ) from exc
        if row is None:
            return None
        return DirectoryUserRecord(
            id=row.id,
            email=row.email,
            discord_user_id=row.discord_user_id,
            first_name=row.first_name,
            last_name=row.last_name,
            domain=row.domain,
            organization=row.organization,
        )

    async def get_organization(self, organization_id: str) -> DirectoryOrganizationRecord | None:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(DirectoryOrganization).where(
                        DirectoryOrganization.id == organization_id
                    )
                )
                row = result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise DirectoryPersistenceException(
                "organization", organization_id, "Failed to read organization data"
            ) from exc
        if row is None:
            return None
        return DirectoryOrganizationRecord(
            id=row.id,
            created_by=row.created_by,
            organization_name=row.organization_name,
            api_key=row.api_key,
            domain=row.domain,
            webhook_app_id=row.webhook_app_id,
            hyperline_id=row.hyperline_id,
        )

    async def link_billing_customer(self, organization_id: str, customer_id: str) -> bool:
        stmt = (
            update(DirectoryOrganization)
            .where(DirectoryOrganization.id == organization_id)
            .values(hyperline_id=customer_id, updated_at=func.now())
        )
        try:
            async with self._session_factory() as session, session.begin():
                result = await session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error(
                "Billing link failed: organization=%s customer=%s error=%s",
                organization_id,
                customer_id,
                exc,
            )
            raise DirectoryPersistenceException(
                "organization", organization_id, "Failed to update organization"
            ) from exc
        return bool(result.rowcount)
