"""User settings router (monthly income)."""

import logging

from fastapi import APIRouter

from pennywise.application.commands.settings import UpdateMonthlyIncomeCommand
from pennywise.application.queries.settings import GetUserSettingsQuery
from pennywise.presentation.api.dependencies import RepoFactory
from pennywise.presentation.api.schemas.settings import (
    UserSettingsResponse,
    UserSettingsUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="Get settings")
async def get_user_settings(factory: RepoFactory) -> UserSettingsResponse:
    """
    Get the current user's settings.

    Returns defaults (income 0) when nothing has been stored yet.
    """
    settings = await GetUserSettingsQuery.from_factory(factory).execute()
    return UserSettingsResponse.from_domain(settings)


@router.put(
    "",
    summary="Update monthly income",
    responses={400: {"description": "Invalid amount"}},
)
async def update_user_settings(
    request: UserSettingsUpdateRequest,
    factory: RepoFactory,
) -> UserSettingsResponse:
    command = UpdateMonthlyIncomeCommand.from_factory(factory)

    try:
        settings = await command.execute(
            monthly_income=request.monthly_income,
            currency=request.currency,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return UserSettingsResponse.from_domain(settings)
