"""SQLAlchemy implementation of ProfileRepository."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pennywise.domain.profile import Profile, ProfileRepository
from pennywise.domain.shared.time import ensure_tz_aware
from pennywise.infrastructure.persistence.sqlalchemy.models import ProfileModel

logger = logging.getLogger(__name__)


class ProfileRepositorySQLAlchemy(ProfileRepository):
    """Profile repository; not user-scoped, lookups take the user id."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[Profile]:
        model = await self._find_model(user_id)
        if model is None:
            return None
        return Profile(
            id=model.id,
            email=model.email,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    async def save(self, profile: Profile) -> None:
        model = await self._find_model(profile.id)
        if model is None:
            self._session.add(
                ProfileModel(
                    id=profile.id,
                    email=profile.email,
                    created_at=profile.created_at,
                    updated_at=profile.updated_at,
                ),
            )
        else:
            model.email = profile.email
            model.updated_at = profile.updated_at
        await self._session.flush()

    async def ensure(self, user_id: UUID, email: Optional[str]) -> Profile:
        profile = await self.find_by_id(user_id)
        if profile is not None:
            return profile

        profile = Profile(id=user_id)
        profile.change_email(email)
        await self.save(profile)
        logger.info("Profile created for user %s", user_id)
        return profile

    async def _find_model(self, user_id: UUID) -> Optional[ProfileModel]:
        stmt = select(ProfileModel).where(ProfileModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
