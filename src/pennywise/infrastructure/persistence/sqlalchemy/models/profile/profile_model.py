"""SQLAlchemy model for user profiles."""

from typing import Optional
from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pennywise.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class ProfileModel(Base, TimestampMixin):
    """One row per identity-provider user that has used the app."""

    __tablename__ = "profiles"

    # Identity provider's user id (token "sub")
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<ProfileModel(id={self.id}, email={self.email})>"
