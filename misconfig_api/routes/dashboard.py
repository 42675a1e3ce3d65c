"""
GET / -- Security misconfiguration showcase page.
GET /hello -- Plain JSON hello.

The home page is the demo's "report": it shows the current Mutable Demo State
and a table of every exposed route with the risk it illustrates and how you
would fix it in a real deployment.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from misconfig_api.config import Settings, get_settings
from misconfig_api.models.schemas import HelloResponse
from misconfig_api.store import DemoState, get_state
from misconfig_api.templating import templates

router = APIRouter()

# ---------------------------------------------------------------------------
# Showcase table rows.
#
# path=None means the row is not a link (the CORS policy applies everywhere).
# docs=True rows disappear from the router when production gating hides the
# Swagger routes; the page marks them instead of linking to a 404.
# ---------------------------------------------------------------------------

FINDINGS: list[dict] = [
    {
        "path": "/api-docs",
        "label": "Swagger UI",
        "risk": "Unauthenticated users can enumerate & invoke internal APIs.",
        "fix": "Disable Swagger in prod (e.g., springdoc.swagger-ui.enabled=false).",
        "docs": True,
    },
    {
        "path": "/graphql",
        "label": "GraphQL Playground",
        "risk": "Introspection leaks schema; brute-force queries possible.",
        "fix": "Disable graphiql & introspection in prod; add auth/RBAC.",
    },
    {
        "path": "/actuator/env",
        "label": None,
        "risk": "Leaks env vars & secrets; some actuator routes have RCE CVEs.",
        "fix": "Restrict or remove actuator endpoints in prod; auth/IP whitelist.",
    },
    {
        "path": "/admin",
        "label": None,
        "risk": "No auth—anyone gets privileged access.",
        "fix": "Add token/session auth & IP filtering.",
    },
    {
        "path": None,
        "label": "* (CORS allow-all)",
        "risk": "Malicious origins can call your APIs (CSRF-style abuse).",
        "fix": "Whitelist trusted domains in CORS config.",
    },
    {
        "path": "/crash",
        "label": None,
        "risk": "Stack trace reveals internal logic & file paths.",
        "fix": "Return generic errors to clients; log details internally.",
    },
    {
        "path": "/files/",
        "label": None,
        "risk": "Directory listing exposes secrets/logs/configs.",
        "fix": "Disable auto-indexing, serve only vetted assets.",
    },
    {
        "path": "/api/update-config",
        "label": "POST only",
        "risk": "Anyone can change production config and forge the audit trail.",
        "fix": "Require authentication & authorization; validate input.",
        "link": False,
    },
]


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home(
    request: Request,
    settings: Settings = Depends(get_settings),
    state: DemoState = Depends(get_state),
):
    """Render the showcase page with the current production state."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": state.snapshot(),
            "findings": FINDINGS,
            "docs_enabled": settings.docs_enabled,
            "app_env": settings.app_env,
        },
    )


@router.get(
    "/hello",
    response_model=HelloResponse,
    summary="Hello World",
    tags=["System"],
)
async def hello() -> HelloResponse:
    return HelloResponse(message="Hello World")
