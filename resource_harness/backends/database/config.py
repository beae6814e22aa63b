"""Configuration for the database backend."""

from pydantic import BaseModel, Field, SecretStr


class DatabaseConfig(BaseModel):
    """Configuration for the database backend."""

    user: str = Field(..., min_length=1)
    password: SecretStr
    # libpq conninfo ("host=db dbname=app") or URI ("postgresql://db/app")
    connect_string: str = Field(..., min_length=1)
