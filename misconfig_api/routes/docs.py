"""
Exposed API documentation.

GET /swagger.json                       -- the raw description file, as-is
GET /api-docs, /swagger, /swagger-ui.html -- Swagger UI for the same document

The viewer is FastAPI's bundled Swagger UI page. Each alias also serves the
parsed document at <alias>/spec.json for the page to load, the same way
swagger-ui-express hangs its init script off the mount path. The aliases exist
because scanners and bug-bounty tooling check all three.

Whether this router is mounted at all is decided by the app factory
(Settings.docs_enabled).
"""

import logging
from pathlib import Path

import yaml
from fastapi import APIRouter
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import FileResponse, JSONResponse

logger = logging.getLogger(__name__)

DOCS_ALIASES: tuple[str, ...] = ("/api-docs", "/swagger", "/swagger-ui.html")


def load_api_document(spec_path: Path) -> dict:
    """Parse the YAML/JSON description file. A missing file fails startup."""
    with open(spec_path, encoding="utf-8") as f:
        document = yaml.safe_load(f)

    if not isinstance(document, dict):
        raise ValueError(f"{spec_path} does not contain an API description object")

    logger.info(
        "Loaded API description %r (%s paths) from %s",
        document.get("info", {}).get("title", "untitled"),
        len(document.get("paths") or {}),
        spec_path,
    )
    return document


def build_docs_router(spec_path: Path, document: dict) -> APIRouter:
    """Routes for the raw file plus one Swagger UI viewer per alias."""
    router = APIRouter(tags=["Documentation"])
    title = document.get("info", {}).get("title", "API Docs")

    @router.get("/swagger.json", summary="Raw API description", include_in_schema=False)
    async def raw_spec():
        # Read per request; a file removed after startup surfaces as a 500
        return FileResponse(spec_path)

    for alias in DOCS_ALIASES:
        _add_viewer(router, alias, title, document)

    return router


def _add_viewer(router: APIRouter, alias: str, title: str, document: dict) -> None:
    spec_url = f"{alias}/spec.json"

    async def viewer():
        return get_swagger_ui_html(openapi_url=spec_url, title=f"{title} - Swagger UI")

    async def spec():
        return JSONResponse(document)

    router.add_api_route(alias, viewer, methods=["GET"], include_in_schema=False)
    router.add_api_route(f"{alias}/", viewer, methods=["GET"], include_in_schema=False)
    router.add_api_route(spec_url, spec, methods=["GET"], include_in_schema=False)
