"""Pydantic schemas for API request/response models."""

from pennywise.presentation.api.schemas.common import ErrorResponse, HealthResponse

__all__ = ["ErrorResponse", "HealthResponse"]
