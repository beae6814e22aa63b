"""Harness configuration shared by every test case of a run."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Literal

from pydantic import Field, field_validator

from resource_harness.models.base import Model

type ResourceKind = Literal["browser", "database"]


class HarnessConfig(Model):
    """Immutable per-process configuration for acquiring one kind of resource."""

    timeout_ms: int = Field(..., gt=0, description="Per-test deadline in ms")
    resource_kind: ResourceKind = Field(..., description="Backend to acquire")
    connection_params: Mapping[str, Any] = Field(
        default_factory=dict,
        description="Backend specific credentials and address",
    )
    release_timeout_ms: int = Field(
        default=5000, gt=0, description="Grace period for closing a resource"
    )

    @field_validator("connection_params", mode="after")
    @classmethod
    def freeze_connection_params(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        """Store a read-only copy of the params."""
        return MappingProxyType(dict(value))

    @property
    def timeout(self) -> float:
        """Per-test deadline in seconds."""
        return self.timeout_ms / 1000

    @property
    def release_timeout(self) -> float:
        """Release grace period in seconds."""
        return self.release_timeout_ms / 1000
