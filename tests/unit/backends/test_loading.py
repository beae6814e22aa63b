"""Tests for backend loading module."""

import pytest

from resource_harness.backends.browser import browser_manifest
from resource_harness.backends.database import database_manifest
from resource_harness.backends.loading import (
    BackendNotFoundError,
    load_backend_manifest,
)


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("browser", browser_manifest),
        ("database", database_manifest),
    ],
)
def test_load_backend_manifest_returns_manifest(key: str, expected: object) -> None:
    """Loads backend manifest by key."""
    manifest = load_backend_manifest(key)

    assert manifest is expected


def test_load_backend_manifest_raises_for_unknown_backend() -> None:
    """Raises BackendNotFoundError for unknown backend key."""
    with pytest.raises(BackendNotFoundError) as exc_info:
        load_backend_manifest("mainframe")

    assert "mainframe" in str(exc_info.value)
    assert "Available backends" in str(exc_info.value)
    assert "browser" in str(exc_info.value)
