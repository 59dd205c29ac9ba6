"""
Shared pytest fixtures and utilities for testing the pydantic value models in linval.

This module provides:
- Utilities for testing pydantic validation
- Helpers for serialization round-trips
- Isolation of the cached library settings
"""

import pytest
from typing import Any, Type, TypeVar
from pydantic import BaseModel, ValidationError

from linval.core.config import get_settings


T = TypeVar('T', bound=BaseModel)


@pytest.fixture
def assert_validation_error():
    """Helper to assert that validating data raises ValidationError."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: Any,
        expected_type: str | None = None,
    ) -> ValidationError:
        """
        Assert that validating data against a model raises ValidationError.

        Args:
            model_class: The pydantic model class
            data: Invalid data to validate
            expected_type: Expected error type (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class.model_validate(data)

        error = exc_info.value
        if expected_type:
            assert any(
                expected_type in str(e['type']).lower() for e in error.errors()
            ), f"Expected error type containing '{expected_type}' not found"

        return error

    return _assert_validation


@pytest.fixture
def assert_serializable():
    """Helper to assert that a model survives dump and validate."""
    def _assert_serialization(model: BaseModel, model_class: Type[T]) -> T:
        """
        Assert that a model can be serialized to dict and reconstructed.

        Args:
            model: The model instance to test
            model_class: The model class for reconstruction

        Returns:
            The reconstructed model
        """
        serialized = model.model_dump()

        reconstructed = model_class.model_validate(serialized)

        assert reconstructed.model_dump() == serialized
        assert reconstructed == model

        return reconstructed

    return _assert_serialization


@pytest.fixture
def configured_settings(monkeypatch):
    """Apply LINVAL_* environment overrides and rebuild the cached settings."""
    def _configure(**overrides: Any):
        for key, value in overrides.items():
            monkeypatch.setenv(f"LINVAL_{key}", str(value))
        get_settings.cache_clear()
        return get_settings()

    yield _configure
    monkeypatch.undo()
    get_settings.cache_clear()
