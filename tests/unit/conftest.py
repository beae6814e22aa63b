"""Fixtures for unit tests running the harness against the fake backend."""

from collections.abc import Generator
from unittest.mock import Mock, patch

import pytest

from resource_harness.models.config import HarnessConfig
from resource_harness.testing.backends import FakeBackend, fake_manifest


@pytest.fixture
def fake_backend() -> FakeBackend:
    """Create fake backend with no delays or failures."""
    return FakeBackend(rows=[{"id": 1}, {"id": 2}, {"id": 3}])


@pytest.fixture
def backend_loader(fake_backend: FakeBackend) -> Generator[Mock]:
    """Make the harness load the fake backend for every resource kind.

    Set ``return_value`` to ``fake_manifest(...)`` to swap in another backend.
    """
    with patch(
        "resource_harness.harness.load_backend_manifest",
        return_value=fake_manifest(fake_backend),
    ) as loader:
        yield loader


@pytest.fixture
def database_config() -> HarnessConfig:
    """Create database harness config with short deadlines."""
    return HarnessConfig(
        timeout_ms=1000,
        resource_kind="database",
        release_timeout_ms=500,
    )


@pytest.fixture
def browser_config() -> HarnessConfig:
    """Create browser harness config with short deadlines."""
    return HarnessConfig(
        timeout_ms=1000,
        resource_kind="browser",
        release_timeout_ms=500,
    )
