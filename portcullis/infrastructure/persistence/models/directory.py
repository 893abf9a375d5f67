"""Directory ORM models: denormalized copies of identity-platform records.

Primary keys are the identity platform's ids; rows are written by upsert only.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from portcullis.infrastructure.persistence.database import Base
from portcullis.infrastructure.persistence.models.mixins import TimestampMixin


class DirectoryOrganization(TimestampMixin, Base):
    """Organization row. Table: organizations."""

    __tablename__ = "organizations"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    created_by: Mapped[str] = mapped_column(String, nullable=False, index=True)
    organization_name: Mapped[str] = mapped_column(String, nullable=False)
    api_key: Mapped[str] = mapped_column(String, nullable=False)
    domain: Mapped[str | None] = mapped_column(String, nullable=True)
    webhook_app_id: Mapped[str | None] = mapped_column(String, nullable=True)
    hyperline_id: Mapped[str | None] = mapped_column(String, nullable=True)


class DirectoryUser(TimestampMixin, Base):
    """User row. Table: users. organization is an organizations.id or empty."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    email: Mapped[str] = mapped_column(String, nullable=False)
    discord_user_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    organization: Mapped[str] = mapped_column(String, nullable=False, default="")
    first_name: Mapped[str] = mapped_column(String, nullable=False)
    last_name: Mapped[str] = mapped_column(String, nullable=False)
    domain: Mapped[str] = mapped_column(String, nullable=False)
