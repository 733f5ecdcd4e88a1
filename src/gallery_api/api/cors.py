"""Permissive CORS handling for the Gallery API.

Starlette's ``CORSMiddleware`` only decorates responses to requests that carry
an ``Origin`` header, and answers preflights with a ``text/plain`` "OK" body.
This API instead stamps the same fixed headers on every response, static
images and error responses included, and answers every ``OPTIONS`` request
with an empty 200 before routing.
"""

from __future__ import annotations

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS")

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
    "Access-Control-Allow-Headers": "Content-Type",
}


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """Add CORS headers to all responses and short-circuit preflights."""

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
