"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from pennywise.domain.profile.profile import Profile


class ProfileRepository(ABC):
    """Repository interface for Profile records (not user-scoped)."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[Profile]:
        """Find a profile by identity user id."""

    @abstractmethod
    async def save(self, profile: Profile) -> None:
        """Insert or update a profile."""

    @abstractmethod
    async def ensure(self, user_id: UUID, email: Optional[str]) -> Profile:
        """Return the profile for ``user_id``, creating it if missing."""
