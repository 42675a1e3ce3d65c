"""
In-memory "production database" for the demo.

A single record tracks who last pushed a config update and when. It lives on
app.state for the life of the process and is lost on restart -- there is no
persistence on purpose.

Both fields are written under one lock, so the container is safe to use
from Starlette's thread pool as well as the event loop. Readers get a
frozen snapshot and never observe one field set without the other.
"""

import threading
from datetime import datetime, timezone

from fastapi import Request

from misconfig_api.models.schemas import ProductionState


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DemoState:
    """The Mutable Demo State: last_modified_by / last_modified_at."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_modified_by: str | None = None
        self._last_modified_at: str | None = None

    def snapshot(self) -> ProductionState:
        with self._lock:
            return ProductionState(
                last_modified_by=self._last_modified_by,
                last_modified_at=self._last_modified_at,
            )

    def record_update(self, user: str) -> ProductionState:
        """Set both fields together and return the new state."""
        with self._lock:
            self._last_modified_by = user
            self._last_modified_at = utc_timestamp()
            return ProductionState(
                last_modified_by=self._last_modified_by,
                last_modified_at=self._last_modified_at,
            )


def get_state(request: Request) -> DemoState:
    """FastAPI dependency: the state container owned by the running app."""
    return request.app.state.demo_state
