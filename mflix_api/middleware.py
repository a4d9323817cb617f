from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from mflix_api.utils.logger import get_logger

logger = get_logger(__name__)

ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"


class SingleOriginCORSMiddleware(BaseHTTPMiddleware):
    """
    Echo CORS headers for exactly one trusted origin.

    Requests from any other origin pass through without CORS headers, so the
    browser's same-origin policy applies. Preflight (OPTIONS) requests from
    the trusted origin are answered here with an empty 200.
    """
    def __init__(self, app: ASGIApp, allowed_origin: str):
        super().__init__(app)
        self.allowed_origin = allowed_origin

    def cors_headers(self, origin: str) -> dict:
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Methods": ALLOW_METHODS,
            "Access-Control-Allow-Headers": ALLOW_HEADERS,
        }

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if origin != self.allowed_origin:
            return await call_next(request)

        if request.method == "OPTIONS":
            logger.debug("preflight %s from %s", request.url.path, origin)
            return Response(status_code=200, headers=self.cors_headers(origin))

        response = await call_next(request)
        response.headers.update(self.cors_headers(origin))
        return response
