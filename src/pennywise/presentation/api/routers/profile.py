"""Profile router."""

import logging

from fastapi import APIRouter

from pennywise.application.commands.profile import UpdateProfileCommand
from pennywise.application.queries.profile import GetProfileQuery
from pennywise.presentation.api.dependencies import RepoFactory
from pennywise.presentation.api.schemas.profile import (
    ProfileResponse,
    ProfileUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="Get profile")
async def get_profile(factory: RepoFactory) -> ProfileResponse:
    """Return the authenticated user's profile."""
    profile = await GetProfileQuery.from_factory(factory).execute()
    return ProfileResponse.from_domain(profile)


@router.patch(
    "",
    summary="Update profile",
    responses={400: {"description": "Invalid input"}},
)
async def update_profile(
    request: ProfileUpdateRequest,
    factory: RepoFactory,
) -> ProfileResponse:
    command = UpdateProfileCommand.from_factory(factory)

    try:
        profile = await command.execute(email=request.email)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ProfileResponse.from_domain(profile)
