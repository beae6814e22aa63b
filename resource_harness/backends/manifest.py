"""Backend manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel

from resource_harness.backends.base import ResourceBackend


@dataclass(frozen=True, kw_only=True)
class BackendManifest[ConfigT: BaseModel, ResourceT]:
    """Manifest describing a backend plugin.

    The manifest contains references to the configuration class and the
    backend factory function for lazy loading of backends based on their key.
    """

    config_cls: type[ConfigT]
    backend_factory: Callable[[ConfigT], ResourceBackend[ResourceT]]
