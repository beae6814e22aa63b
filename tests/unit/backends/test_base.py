"""Tests for ResourceBackend base class."""

import asyncio
from dataclasses import dataclass, field

import pytest

from resource_harness.backends.base import ResourceBackend


@dataclass(frozen=True, kw_only=True)
class RecordingBackend(ResourceBackend[str]):
    """Test backend recording closed resources."""

    close_delay: float = 0.0
    closed: list[str] = field(default_factory=list)

    async def open(self) -> str:  # pragma: no cover
        """Return a resource name."""
        return "resource"

    async def close(self, resource: str) -> None:
        """Record the resource after the configured delay."""
        await asyncio.sleep(self.close_delay)
        self.closed.append(resource)


class TestCloseWithin:
    """Tests for close_within method."""

    async def test_closes_resource(self) -> None:
        """Closes the resource when close is fast enough."""
        backend = RecordingBackend()

        await backend.close_within("conn-1", timeout=1.0)

        assert backend.closed == ["conn-1"]

    async def test_raises_timeout_error(self) -> None:
        """Raises TimeoutError when close exceeds the timeout."""
        backend = RecordingBackend(close_delay=1.0)

        with pytest.raises(TimeoutError):
            await backend.close_within("conn-1", timeout=0.01)

        assert backend.closed == []
