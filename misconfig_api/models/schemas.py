"""
Misconfig Demo API — Pydantic Data Models

Request and response bodies for the JSON routes. The HTML, file and GraphQL
routes are rendered by their own sub-applications and have no models here.

The Field() descriptions and examples show up in FastAPI's generated schema.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# GET /hello
# ---------------------------------------------------------------------------

class HelloResponse(BaseModel):
    message: str = Field(default="Hello World", examples=["Hello World"])


# ---------------------------------------------------------------------------
# GET /actuator/env — fake Spring Boot actuator dump
# ---------------------------------------------------------------------------

class ActuatorEnv(BaseModel):
    """Hardcoded "environment" leaked by the actuator route.
    Field names are upper-case to look like real env vars."""

    DB_USER: str = "admin"
    DB_PASSWORD: str = "supersecret"
    APP_ENV: str = Field(
        description="Runtime mode the server was started in.",
        examples=["development"],
    )


# ---------------------------------------------------------------------------
# POST /api/update-config — the only mutator
# ---------------------------------------------------------------------------

class ProductionState(BaseModel):
    """Snapshot of the Mutable Demo State. Both fields are None until the
    first update, then both are set."""

    model_config = ConfigDict(frozen=True)

    last_modified_by: str | None = Field(default=None, examples=["alice"])
    last_modified_at: str | None = Field(
        default=None,
        description="ISO-8601 UTC timestamp of the last update.",
        examples=["2026-10-18T12:00:00.123Z"],
    )


class UpdateConfigRequest(BaseModel):
    """No validation and no authorization -- anyone can claim to be anyone.

    Any JSON value is accepted for user: falsy values (null, "", 0, false,
    [], {}) count as missing, anything else is stringified."""

    user: str | None = Field(
        default=None,
        description="Who is making the change. Missing or empty means 'anonymous'.",
        examples=["alice"],
    )

    @field_validator("user", mode="before")
    @classmethod
    def stringify_user(cls, value: Any) -> str | None:
        if value is None or isinstance(value, str):
            return value
        return str(value) if value else None


class UpdateConfigResponse(BaseModel):
    message: str = Field(examples=["⚠️ Production config updated!"])
    production_db: ProductionState
