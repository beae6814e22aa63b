"""Tests for ResourceHandle."""

import asyncio

import pytest

from resource_harness.exceptions import ReleaseFailure, ResourceAlreadyReleased
from resource_harness.handle import ResourceHandle
from resource_harness.testing.backends import FakeBackend, FakeResource


async def open_handle(
    backend: FakeBackend, release_timeout: float = 1.0
) -> ResourceHandle[FakeResource]:
    """Open a resource on the backend and wrap it in a handle."""
    resource = await backend.open()
    return ResourceHandle(
        "database", backend, resource, release_timeout=release_timeout
    )


async def test_live_until_released() -> None:
    """Handle exposes the resource until released."""
    backend = FakeBackend()
    handle = await open_handle(backend)

    assert handle.is_live
    assert handle.resource is backend.opened[0]
    assert handle.acquired_at.tzinfo is not None

    await handle.release()

    assert not handle.is_live
    with pytest.raises(ResourceAlreadyReleased, match="already released"):
        _ = handle.resource


async def test_release_is_idempotent() -> None:
    """Releasing twice closes the resource once and raises nothing."""
    backend = FakeBackend()
    handle = await open_handle(backend)

    await handle.release()
    await handle.release()

    assert backend.opened[0].close_calls == 1


async def test_concurrent_release_closes_once() -> None:
    """Overlapping release calls still close the resource once."""
    backend = FakeBackend(close_delay=0.01)
    handle = await open_handle(backend)

    await asyncio.gather(handle.release(), handle.release())

    assert backend.opened[0].close_calls == 1


async def test_failed_close_raises_release_failure_and_marks_released() -> None:
    """Close errors surface as ReleaseFailure; the handle is released anyway."""
    backend = FakeBackend(close_error=OSError("broken pipe"))
    handle = await open_handle(backend)

    with pytest.raises(ReleaseFailure, match="broken pipe"):
        await handle.release()

    assert not handle.is_live
    await handle.release()
    assert backend.opened[0].close_calls == 1


async def test_close_exceeding_grace_timeout() -> None:
    """Close slower than the grace timeout raises ReleaseFailure."""
    backend = FakeBackend(close_delay=10)
    handle = await open_handle(backend, release_timeout=0.01)

    with pytest.raises(ReleaseFailure, match="not closed within"):
        await handle.release()

    assert not handle.is_live


async def test_repr_shows_state() -> None:
    """Representation shows kind and state but not the resource."""
    handle = await open_handle(FakeBackend())

    assert "kind='database'" in repr(handle)
    assert "state=acquired" in repr(handle)

    await handle.release()

    assert "state=released" in repr(handle)
