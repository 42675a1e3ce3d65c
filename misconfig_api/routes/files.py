"""
/files -- Static file exposure with directory listing.

Starlette's StaticFiles serves the public directory. It has no auto-index,
so ListingStaticFiles adds one: any directory under the mount answers with an
HTML list of its entries (templates/listing.html), dotfiles included. That is
the misconfiguration -- backups, logs and stray configs become browsable.

Path traversal is still blocked by StaticFiles.lookup_path.
"""

import os
import stat
from urllib.parse import quote

from starlette.concurrency import run_in_threadpool
from starlette.datastructures import URL
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

from misconfig_api.templating import templates


class ListingStaticFiles(StaticFiles):
    """StaticFiles that renders an index page for directories."""

    async def get_response(self, path: str, scope: Scope) -> Response:
        if scope["method"] in ("GET", "HEAD"):
            full_path, stat_result = await run_in_threadpool(self.lookup_path, path)
            if stat_result is not None and stat.S_ISDIR(stat_result.st_mode):
                return await self.directory_response(path, full_path, scope)
        return await super().get_response(path, scope)

    async def directory_response(self, path: str, full_path: str, scope: Scope) -> Response:
        url = URL(scope=scope)
        if not scope["path"].endswith("/"):
            # Relative links in the listing need the trailing slash
            return RedirectResponse(url=url.replace(path=url.path + "/"))

        entries = await run_in_threadpool(list_directory, full_path)
        response = templates.TemplateResponse(
            Request(scope),
            "listing.html",
            {
                "url_path": url.path,
                "entries": listing_rows(entries),
                "is_root": path == ".",
            },
        )
        if scope["method"] == "HEAD":
            # Same headers (content-length included), no body
            return Response(status_code=response.status_code, headers=response.headers)
        return response


def list_directory(full_path: str) -> list[tuple[str, bool]]:
    """(name, is_dir) pairs, directories first, then alphabetical."""
    entries = []
    with os.scandir(full_path) as it:
        for entry in it:
            entries.append((entry.name, entry.is_dir(follow_symlinks=False)))
    entries.sort(key=lambda e: (not e[1], e[0].lower()))
    return entries


def listing_rows(entries: list[tuple[str, bool]]) -> list[dict]:
    """Link target and label per entry; directories get a trailing slash."""
    suffix = {True: "/", False: ""}
    return [
        {"href": quote(name) + suffix[is_dir], "display": name + suffix[is_dir]}
        for name, is_dir in entries
    ]
