"""Unit tests for the API exception handlers.

A bare FastAPI app with only the handlers registered is enough to check the
status code and ``{"detail", "code"}`` body produced for each error type.
"""

from uuid import UUID

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from pennywise.domain.budgeting import (
    CategoryNotFoundError,
    DuplicateCategoryError,
    InvalidAmountError,
    MissingCategoryMetadataError,
)
from pennywise.domain.shared.exceptions import (
    BusinessRuleViolation,
    UnauthenticatedError,
    ValidationError,
)
from pennywise.presentation.api.exception_handlers import setup_exception_handlers

CATEGORY_ID = UUID("c0000000-0000-0000-0000-000000000001")

ERRORS = {
    "invalid-amount": InvalidAmountError("-1", "must not be negative"),
    "validation": ValidationError("Select at least one category"),
    "unauthenticated": UnauthenticatedError("read expenses"),
    "not-found": CategoryNotFoundError(CATEGORY_ID),
    "duplicate": DuplicateCategoryError("Groceries"),
    "business-rule": BusinessRuleViolation("Not allowed"),
    "missing-metadata": MissingCategoryMetadataError(CATEGORY_ID),
}


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/raise/{name}")
    async def raise_error(name: str):
        raise ERRORS[name]

    @app.get("/storage")
    async def raise_storage_error():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    return TestClient(app)


@pytest.mark.parametrize(
    ("name", "status_code", "code"),
    [
        ("invalid-amount", 400, "INVALID_AMOUNT"),
        ("validation", 400, "VALIDATION_ERROR"),
        ("unauthenticated", 401, "UNAUTHENTICATED"),
        ("not-found", 404, "CATEGORY_NOT_FOUND"),
        ("duplicate", 409, "DUPLICATE_CATEGORY"),
        ("business-rule", 422, "BUSINESS_RULE_VIOLATION"),
        ("missing-metadata", 500, "MISSING_CATEGORY_METADATA"),
    ],
)
def test_domain_exception_mapping(client, name, status_code, code):
    response = client.get(f"/raise/{name}")

    assert response.status_code == status_code
    body = response.json()
    assert body["code"] == code
    assert body["detail"] == ERRORS[name].message


def test_storage_failure_is_service_unavailable(client):
    response = client.get("/storage")

    assert response.status_code == 503
    assert response.json() == {
        "detail": "The data store is currently unavailable",
        "code": "STORAGE_FAILURE",
    }


def test_details_are_not_exposed(client):
    response = client.get("/raise/missing-metadata")

    assert "details" not in response.json()
    assert str(CATEGORY_ID) in response.json()["detail"]
