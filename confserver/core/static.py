from __future__ import annotations

import os

from starlette.exceptions import HTTPException
from starlette.staticfiles import StaticFiles

ENTRY_DOCUMENT = "index.html"


class SPAStaticFiles(StaticFiles):
    """Serve the built client bundle, answering unknown paths with the entry document."""

    async def check_config(self) -> None:
        # the bundle may be deployed after the server starts; lookups just 404 until then
        if self.directory is not None and not os.path.isdir(self.directory):
            return
        await super().check_config()

    async def get_response(self, path, scope):
        try:
            return await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
        # client-side routes (/schedule, /speakers/3, ...) are resolved by the SPA
        return await super().get_response(ENTRY_DOCUMENT, scope)
