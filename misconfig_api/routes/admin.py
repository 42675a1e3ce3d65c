"""
Management-style routes that should never be public.

GET /admin          -- "admin panel" with no access check
GET /actuator/env   -- fake Spring Boot actuator leaking credentials
GET /crash          -- unhandled exception, stack trace goes to the caller

None of these talk to anything real. The values are hardcoded so the demo
is safe to run anywhere.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from misconfig_api.config import Settings, get_settings
from misconfig_api.models.schemas import ActuatorEnv

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/admin",
    response_class=PlainTextResponse,
    summary="Admin panel",
    description="Privileged area reachable without any authentication.",
    tags=["Misconfiguration"],
)
async def admin() -> str:
    return "⚠️ Welcome to Admin Panel — No Auth Needed"


@router.get(
    "/actuator/env",
    response_model=ActuatorEnv,
    summary="Actuator environment dump",
    description="Returns fabricated credentials and the current runtime mode.",
    tags=["Misconfiguration"],
)
async def actuator_env(settings: Settings = Depends(get_settings)) -> ActuatorEnv:
    return ActuatorEnv(
        DB_USER="admin",
        DB_PASSWORD="supersecret",
        APP_ENV=settings.app_env,
    )


@router.get(
    "/crash",
    summary="Verbose error",
    description="Always fails. With verbose errors on, the response body is the traceback.",
    tags=["Misconfiguration"],
)
async def crash():
    logger.warning("Crash route hit, raising on purpose")
    raise RuntimeError("Simulated crash: stack trace leak")
