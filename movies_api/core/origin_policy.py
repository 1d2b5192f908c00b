"""
Cross-origin access policy.

A request is allowed when it carries no ``Origin`` header (same-origin
requests, curl, server-to-server calls) or when the origin exactly matches
an entry of a static allow-list.
"""

import logging
from typing import Iterable, Optional

from starlette.datastructures import MutableHeaders
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:8080",
    "http://localhost:1234",
    "https://movies.com",
    "https://midu.dev",
)

ALLOWED_METHODS = ("GET", "HEAD", "PUT", "PATCH", "POST", "DELETE")
REJECTION_MESSAGE = "Not allowed by CORS"


def is_origin_allowed(origin: Optional[str], allow_list: Iterable[str]) -> bool:
    """
    Decide whether a cross-origin request may proceed.

    Args:
        origin: Value of the request's Origin header, None when absent
        allow_list: Exact origin strings (scheme://host[:port])

    Returns:
        True if the origin is absent or listed
    """
    if not origin:
        return True
    return origin in allow_list


class OriginPolicyMiddleware(BaseHTTPMiddleware):
    """Abort requests from unlisted origins before they reach CORS handling or routes."""

    def __init__(self, app, allow_origins: Iterable[str] = DEFAULT_ALLOWED_ORIGINS):
        super().__init__(app)
        self.allow_origins = frozenset(allow_origins)

    async def dispatch(self, request: Request, call_next) -> Response:
        origin = request.headers.get("origin")
        if not is_origin_allowed(origin, self.allow_origins):
            logger.warning("Rejected %s %s from origin %s", request.method, request.url.path, origin)
            return PlainTextResponse(REJECTION_MESSAGE, status_code=403)
        return await call_next(request)


class AllowListCORSMiddleware(CORSMiddleware):
    """CORSMiddleware that leaves an Access-Control-Allow-Origin set by a route alone."""

    @staticmethod
    def allow_explicit_origin(headers: MutableHeaders, origin: str) -> None:
        # GET /movies answers with "*" for every caller
        if "access-control-allow-origin" in headers:
            return
        CORSMiddleware.allow_explicit_origin(headers, origin)
