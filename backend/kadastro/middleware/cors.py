from typing import Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """
    Adds the same CORS headers to every response and answers every
    OPTIONS request itself (200, empty body), whatever the path.

    Unlike starlette's CORSMiddleware, the headers do not depend on the
    request's Origin and preflights never reach the router.
    """

    def __init__(
        self,
        app,
        allow_origin: str = "*",
        allow_methods: Sequence[str] = ("GET", "OPTIONS"),
        allow_headers: Sequence[str] = ("Content-Type",),
    ):
        super().__init__(app)
        self.headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": ", ".join(allow_methods),
            "Access-Control-Allow-Headers": ", ".join(allow_headers),
        }

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)
        response.headers.update(self.headers)
        return response
