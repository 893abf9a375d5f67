"""ORM models. Import here so Alembic autogenerate sees every table."""

from portcullis.infrastructure.persistence.models.directory import (
    DirectoryOrganization,
    DirectoryUser,
)
from portcullis.infrastructure.persistence.models.mixins import TimestampMixin

__all__ = ["DirectoryOrganization", "DirectoryUser", "TimestampMixin"]
