"""Lookup of resource backends registered as package entry points."""

from importlib.metadata import entry_points
from typing import Any

from resource_harness.backends.manifest import BackendManifest

ENTRY_POINT_GROUP = "resource_harness.backends"


class BackendNotFoundError(Exception):
    """No backend is registered for the requested resource kind."""


def load_backend_manifest(key: str) -> BackendManifest[Any, Any]:
    """Find the backend plugin serving a resource kind.

    Args:
        key: Resource kind, matching the entry point name under
             ``resource_harness.backends`` (e.g. "browser", "database")

    Returns:
        Manifest with the backend's config model and factory

    Raises:
        BackendNotFoundError: If no installed distribution registers the kind

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)
    matches = entries.select(name=key)
    if matches:
        manifest: BackendManifest[Any, Any] = next(iter(matches)).load()
        return manifest

    available = sorted(entry.name for entry in entries)
    raise BackendNotFoundError(
        f"No backend registered for resource kind '{key}'. "
        f"Available backends: {available}"
    )
