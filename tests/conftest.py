"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import pytest

from mixinject import MixinRegistry

# =============================================================================
# Fixtures: Fresh Registries
# =============================================================================


@pytest.fixture
def registry():
    """Create a fresh, permissive MixinRegistry for each test."""
    return MixinRegistry()


@pytest.fixture
def strict_registry():
    """A registry validating constructors and extension inheritance."""
    return MixinRegistry(strict=True, abstract=True)


# =============================================================================
# Fixtures: Sample Mixins
# =============================================================================


@runtime_checkable
class Validating(Protocol):
    """Surface of a form validation mixin."""

    def validate(self, data: dict) -> bool: ...


class RequiredFieldsValidator:
    """Validation mixin rejecting forms with empty fields."""

    def __init__(self):
        self.errors = []

    def validate(self, data: dict) -> bool:
        self.errors = [key for key, value in data.items() if not value]
        return not self.errors


class Submitter:
    """Submission mixin recording what it sent."""

    def __init__(self):
        self.sent = []

    def submit(self, data: dict) -> None:
        self.sent.append(data)


class Form:
    """Plain host object receiving mixins as attributes."""


@pytest.fixture
def form():
    """A fresh host for the form mixins."""
    return Form()


@pytest.fixture
def form_registry(registry):
    """Registry with the form validation and submission mixins registered."""
    registry.register("validation", RequiredFieldsValidator, protocol=Validating)
    registry.register("submit", Submitter)
    return registry
