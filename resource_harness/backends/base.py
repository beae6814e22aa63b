"""Abstract base class for external resource backends."""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ResourceBackend[T](ABC):
    """Abstract base for backends that hand out expensive external resources.

    Generic type T represents the raw resource - whatever object the backend
    returns from ``open`` and expects back in ``close`` and its other
    operations. This could be a database connection, or a composite session
    object holding a browser process and its page.
    """

    @abstractmethod
    async def open(self) -> T:
        """Acquire a new resource.

        Implementations must not leak partially created resources when the
        call is cancelled while in flight.

        Returns:
            The live resource

        """

    @abstractmethod
    async def close(self, resource: T) -> None:
        """Release a resource returned by ``open``.

        Args:
            resource: Resource to close

        """

    async def close_within(self, resource: T, timeout: float) -> None:
        """Close a resource, giving up after a grace period.

        Args:
            resource: Resource to close
            timeout: Maximum time to wait for the close in seconds

        Raises:
            TimeoutError: If the close does not finish within timeout

        """
        async with asyncio.timeout(timeout):
            await self.close(resource)
