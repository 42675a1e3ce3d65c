"""
Runtime settings, read from environment variables.

Only Settings.from_env() touches os.environ. Everything else gets a Settings
instance: the app factory stores it on app.state and route handlers ask for
it through the get_settings dependency.

Empty variables fall back to the defaults, so PORT="" behaves like an unset
PORT. Bad values (PORT=abc, VERBOSE_ERRORS=maybe) fail at startup with a
pydantic ValidationError.
"""

import os
from pathlib import Path

from fastapi import Request
from pydantic import BaseModel, ConfigDict, Field

PACKAGE_DIR = Path(__file__).resolve().parent

# Settings field -> environment variable
ENV_VARS: dict[str, str] = {
    "host": "HOST",
    "port": "PORT",
    "app_env": "APP_ENV",
    "hide_docs_in_production": "HIDE_DOCS_IN_PRODUCTION",
    "verbose_errors": "VERBOSE_ERRORS",
    "log_level": "LOG_LEVEL",
    "spec_path": "SWAGGER_SPEC_PATH",
    "public_dir": "PUBLIC_DIR",
}


class Settings(BaseModel):
    """Process configuration for the demo server."""

    model_config = ConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    app_env: str = Field(
        default="development",
        description="Runtime mode string. Echoed by /actuator/env.",
    )
    hide_docs_in_production: bool = Field(
        default=False,
        description="Skip mounting the Swagger routes when app_env is production.",
    )
    verbose_errors: bool = Field(
        default=True,
        description="Return the framework's traceback page for unhandled errors.",
    )
    log_level: str = "INFO"
    spec_path: Path = PACKAGE_DIR / "swagger.yaml"
    public_dir: Path = PACKAGE_DIR / "public"

    @property
    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    @property
    def docs_enabled(self) -> bool:
        """Some copies of this demo hide Swagger in production, some never do.
        hide_docs_in_production picks the behavior explicitly."""
        return not (self.hide_docs_in_production and self.is_production)

    @classmethod
    def from_env(cls) -> "Settings":
        values = {
            field: os.environ[var]
            for field, var in ENV_VARS.items()
            if os.environ.get(var)
        }
        return cls(**values)


def get_settings(request: Request) -> Settings:
    """FastAPI dependency: the settings the running app was built with."""
    return request.app.state.settings
