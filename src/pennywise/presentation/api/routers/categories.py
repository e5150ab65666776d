"""Categories router for budget category management endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from pennywise.application.commands.budgeting import (
    CategorySetupItem,
    CreateCategoryCommand,
    DeleteCategoryCommand,
    SetupCategoriesCommand,
    UpdateCategoryCommand,
)
from pennywise.application.dtos.budgeting import CategoryDTO
from pennywise.application.queries.budgeting import ListCategoriesQuery
from pennywise.domain.budgeting.value_objects import PRESET_CATEGORIES
from pennywise.presentation.api.dependencies import RepoFactory
from pennywise.presentation.api.schemas.categories import (
    CategoryCreateRequest,
    CategoryDeleteResponse,
    CategoryListResponse,
    CategoryPresetResponse,
    CategoryResponse,
    CategorySetupRequest,
    CategoryUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List categories",
    responses={200: {"description": "Categories, newest first"}},
)
async def list_categories(factory: RepoFactory) -> CategoryListResponse:
    result = await ListCategoriesQuery.from_factory(factory).execute()
    return CategoryListResponse(
        categories=[CategoryResponse.from_dto(dto) for dto in result],
        total=len(result),
    )


@router.get(
    "/presets",
    summary="List preset categories",
)
async def list_presets() -> list[CategoryPresetResponse]:
    """Suggested categories (with colors) offered during onboarding."""
    return [
        CategoryPresetResponse(name=preset.name, color=preset.color)
        for preset in PRESET_CATEGORIES
    ]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    responses={
        201: {"description": "Category created"},
        400: {"description": "Invalid input"},
        409: {"description": "Category name already taken"},
    },
)
async def create_category(
    request: CategoryCreateRequest,
    factory: RepoFactory,
) -> CategoryResponse:
    command = CreateCategoryCommand.from_factory(factory)

    try:
        category = await command.execute(
            name=request.name,
            color=request.color,
            budget_amount=request.budget_amount,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryResponse.from_dto(CategoryDTO.from_entity(category))


@router.post(
    "/setup",
    status_code=status.HTTP_201_CREATED,
    summary="Set up initial categories",
    responses={
        201: {"description": "Categories created"},
        400: {"description": "Invalid budget"},
        409: {"description": "Category name repeated or already taken"},
    },
)
async def setup_categories(
    request: CategorySetupRequest,
    factory: RepoFactory,
) -> CategoryListResponse:
    """
    Create the initial categories in one go.

    Preset names get their preset color; custom names get the next color
    of the custom palette unless a color is given. Every budget must be
    greater than zero.
    """
    command = SetupCategoriesCommand.from_factory(factory)

    try:
        categories = await command.execute(
            [
                CategorySetupItem(
                    name=item.name,
                    budget_amount=item.budget_amount,
                    color=item.color,
                )
                for item in request.categories
            ],
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryListResponse(
        categories=[
            CategoryResponse.from_dto(CategoryDTO.from_entity(c)) for c in categories
        ],
        total=len(categories),
    )


@router.patch(
    "/{category_id}",
    summary="Update category",
    responses={
        200: {"description": "Category updated"},
        404: {"description": "Category not found"},
        409: {"description": "Category name already taken"},
    },
)
async def update_category(
    category_id: UUID,
    request: CategoryUpdateRequest,
    factory: RepoFactory,
) -> CategoryResponse:
    command = UpdateCategoryCommand.from_factory(factory)

    try:
        category = await command.execute(
            category_id=category_id,
            name=request.name,
            color=request.color,
            budget_amount=request.budget_amount,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryResponse.from_dto(CategoryDTO.from_entity(category))


@router.delete(
    "/{category_id}",
    summary="Delete category",
    responses={
        200: {"description": "Category and its expenses deleted"},
        404: {"description": "Category not found"},
    },
)
async def delete_category(
    category_id: UUID,
    factory: RepoFactory,
) -> CategoryDeleteResponse:
    """Delete a category together with every expense filed under it."""
    command = DeleteCategoryCommand.from_factory(factory)

    try:
        deleted_expenses = await command.execute(category_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CategoryDeleteResponse(
        message="Category deleted",
        deleted_expenses=deleted_expenses,
    )
