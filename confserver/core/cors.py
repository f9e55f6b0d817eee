"""CORS policy: an origin allow-list gate in front of Starlette's CORSMiddleware."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from confserver.core.config import Settings

logger = logging.getLogger(__name__)

REJECTED_MESSAGE = "This origin is not allowed by CORS"


class OriginAllowListMiddleware(BaseHTTPMiddleware):
    """Reject requests from origins outside the allow-list before they reach a router.

    Requests without an Origin header (curl, server-to-server calls) are let through.
    """

    def __init__(self, app, *, allowed_origins) -> None:
        super().__init__(app)
        self._allowed = frozenset(allowed_origins)

    async def dispatch(self, request, call_next):
        origin = request.headers.get("origin")
        if origin and origin not in self._allowed:
            logger.warning("Rejected %s %s from origin %s", request.method, request.url.path, origin)
            return JSONResponse({"message": REJECTED_MESSAGE}, status_code=403)
        return await call_next(request)


def install_cors(app: FastAPI, settings: Settings) -> None:
    """Attach the configured CORS policy. The gate is added last so it runs first."""
    if settings.cors_mode == "permissive":
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )
        return
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allowed_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(OriginAllowListMiddleware, allowed_origins=settings.cors_allowed_origins)
