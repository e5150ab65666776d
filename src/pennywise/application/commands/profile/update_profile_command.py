"""Update the current user's profile."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pennywise.domain.profile import Profile, ProfileRepository

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory
    from pennywise.application.ports.identity import CurrentUser


class UpdateProfileCommand:
    def __init__(self, profile_repo: ProfileRepository, current_user: CurrentUser):
        self._profile_repo = profile_repo
        self._current_user = current_user

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateProfileCommand:
        return cls(
            profile_repo=factory.profile_repository(),
            current_user=factory.current_user,
        )

    async def execute(self, email: Optional[str]) -> Profile:
        profile = await self._profile_repo.ensure(
            self._current_user.user_id,
            self._current_user.email,
        )
        profile.change_email(email)
        await self._profile_repo.save(profile)
        return profile
