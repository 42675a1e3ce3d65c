"""
Misconfig Demo API -- Application entry point.

Run with:
    python -m misconfig_api
or:
    uvicorn misconfig_api.main:create_app --factory --port 3000

Then open http://localhost:3000 for the showcase page.

This file:
  1. Configures logging
  2. Creates the FastAPI application (create_app)
  3. Adds the wildcard CORS policy and the verbose error handler
  4. Mounts all route modules (dashboard, admin, configure, docs, graphql, files)
  5. Runs uvicorn (run)

EDUCATIONAL DEMO: every route here is insecure on purpose. Do not deploy.
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.errors import ServerErrorMiddleware

from misconfig_api.config import Settings
from misconfig_api.routes import admin, configure, dashboard
from misconfig_api.routes.docs import build_docs_router, load_api_document
from misconfig_api.routes.files import ListingStaticFiles
from misconfig_api.routes.graphql_api import build_graphql_router
from misconfig_api.store import DemoState

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application. Each call gets its own state container."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    # FastAPI's own /docs and /openapi.json are switched off; the exposed
    # documentation is the hand-written swagger.yaml served by routes/docs.py
    app = FastAPI(
        title="Security Misconfiguration Demo",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.demo_state = DemoState()

    # -----------------------------------------------------------------------
    # Middleware
    #
    # add_middleware wraps from the inside out: the error handler is added
    # first so it sits *inside* CORS and every 500, traceback page or plain
    # "Internal Server Error", still carries Access-Control-Allow-Origin.
    # Starlette's built-in ServerErrorMiddleware stays outermost and
    # re-raises to the server log.
    # -----------------------------------------------------------------------

    app.add_middleware(ServerErrorMiddleware, debug=settings.verbose_errors)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],         # Any origin, every route
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------

    app.include_router(dashboard.router)
    app.include_router(admin.router)
    app.include_router(configure.router)

    document = load_api_document(settings.spec_path)
    if settings.docs_enabled:
        app.include_router(build_docs_router(settings.spec_path, document))
    else:
        logger.info("APP_ENV=%s: Swagger routes hidden", settings.app_env)

    app.include_router(build_graphql_router(), prefix="/graphql")

    app.mount(
        "/files",
        ListingStaticFiles(directory=settings.public_dir),
        name="files",
    )

    return app


def run() -> None:
    """Console entry point: read env, log the banner, serve.

    uvicorn builds the app through the create_app factory; importing this
    module builds nothing.
    """
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    logger.info("🚨 Misconfig API running at http://localhost:%d", settings.port)
    uvicorn.run(
        "misconfig_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
