"""Handle wrapping one acquired external resource."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any

from resource_harness.backends.base import ResourceBackend
from resource_harness.exceptions import ReleaseFailure, ResourceAlreadyReleased
from resource_harness.models.config import ResourceKind

log = logging.getLogger(__name__)


class ResourceHandle[T]:
    """Live reference to a resource acquired from a backend.

    The handle has two states, acquired and released, with a single one-way
    transition. Once released, every access to ``resource`` raises
    ``ResourceAlreadyReleased``; releasing again is a no-op.
    """

    def __init__(
        self,
        kind: ResourceKind,
        backend: ResourceBackend[T],
        resource: T,
        release_timeout: float = 5.0,
    ) -> None:
        self.kind = kind
        self.backend: Any = backend
        self.acquired_at = datetime.now(timezone.utc)
        self.release_timeout = release_timeout
        self._resource = resource
        self._live = True
        self._release_lock = asyncio.Lock()

    def __repr__(self) -> str:
        state = "acquired" if self._live else "released"
        return (
            f"ResourceHandle(kind={self.kind!r}, "
            f"acquired_at={self.acquired_at.isoformat()}, state={state})"
        )

    @property
    def is_live(self) -> bool:
        """Whether the resource has not been released yet."""
        return self._live

    @property
    def resource(self) -> T:
        """The raw resource, for use with the backend's operations."""
        if not self._live:
            raise ResourceAlreadyReleased(
                f"{self.kind} resource acquired at "
                f"{self.acquired_at.isoformat()} was already released"
            )
        return self._resource

    async def release(self) -> None:
        """Close the resource once; later calls return immediately.

        The handle is marked released before the backend is asked to close,
        so a failed close still leaves it unusable.

        Raises:
            ReleaseFailure: If the backend close fails or exceeds the grace
                timeout

        """
        async with self._release_lock:
            if not self._live:
                return
            self._live = False

            log.debug("Releasing %s resource", self.kind)
            try:
                await self.backend.close_within(self._resource, self.release_timeout)
            except TimeoutError as exc:
                raise ReleaseFailure(
                    f"{self.kind} resource not closed within "
                    f"{self.release_timeout:g} seconds"
                ) from exc
            except Exception as exc:
                raise ReleaseFailure(
                    f"Failed to close {self.kind} resource: {exc}"
                ) from exc
