"""
POST /api/update-config -- Simulated production config change.

The only route that mutates anything. It takes an optional "user" from the
body, stamps the Mutable Demo State with that user and the current time, and
echoes the new state back.

MISCONFIGURATION: no authentication, no authorization, no validation. Any
caller from any origin can "change production" and pick whatever name they
like for the audit trail. The body is read leniently, like a JSON body parser
that only looks at application/json requests: a text/plain or form POST (a
cross-site "simple" request) still goes through, as anonymous.
"""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError

from misconfig_api.models.schemas import UpdateConfigRequest, UpdateConfigResponse
from misconfig_api.store import DemoState, get_state

logger = logging.getLogger(__name__)

router = APIRouter()


async def read_json_object(request: Request) -> dict:
    """The request body as a dict, or {} when there is nothing to use.

    Only application/json bodies are parsed. Bytes that are not valid JSON
    there get FastAPI's usual 422; any other content type, an empty body or a
    non-object JSON value is treated as {}.
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != "application/json":
        return {}

    raw = await request.body()
    if not raw:
        return {}

    try:
        body = json.loads(raw)
    except ValueError as e:
        raise RequestValidationError(
            [
                {
                    "type": "json_invalid",
                    "loc": ("body", getattr(e, "pos", 0)),
                    "msg": "JSON decode error",
                    "input": {},
                    "ctx": {"error": getattr(e, "msg", str(e))},
                }
            ],
            body=raw.decode("utf-8", errors="replace"),
        ) from e

    return body if isinstance(body, dict) else {}


@router.post(
    "/api/update-config",
    response_model=UpdateConfigResponse,
    summary="Update production config",
    description="Records who changed the production config and when. No auth required.",
    tags=["Misconfiguration"],
)
async def update_config(
    request: Request,
    state: DemoState = Depends(get_state),
) -> UpdateConfigResponse:
    payload = UpdateConfigRequest.model_validate(await read_json_object(request))
    user = payload.user or "anonymous"

    production_db = state.record_update(user)
    logger.warning(
        "Production config updated by %r at %s",
        production_db.last_modified_by,
        production_db.last_modified_at,
    )

    return UpdateConfigResponse(
        message="⚠️ Production config updated!",
        production_db=production_db,
    )
