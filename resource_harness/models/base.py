"""Shared pydantic base for harness settings and check definitions."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Frozen model; configuration is fixed once a run starts."""

    model_config = ConfigDict(frozen=True)
