import logging
import time

from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware

from src.api.error import error_response
from src.app.services.rate_limiter import RateLimiter
from src.domain.result import Error

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}


def client_address(request: Request, client_ip_header: str = "") -> str:
    """
    Address used to key rate limiting.

    Behind a reverse proxy the socket peer is the proxy itself, so the first
    entry of the configured forwarding header wins when present.
    """
    if client_ip_header:
        forwarded = request.headers.get(client_ip_header)
        if forwarded:
            return forwarded.split(",")[0].strip()
    if request.client is not None:
        return request.client.host
    return "unknown"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Rejects requests with 429 once a client exceeds its sliding window"""

    def __init__(self, app, limiter: RateLimiter, client_ip_header: str = ""):
        super().__init__(app)
        self.limiter = limiter
        self.client_ip_header = client_ip_header

    async def dispatch(self, request: Request, call_next):
        address = client_address(request, self.client_ip_header)
        decision = self.limiter.hit(address)

        if not decision.allowed:
            logger.warning(
                f"Rate limit exceeded for {address}: {request.method} {request.url.path}"
            )
            return error_response(
                status.HTTP_429_TOO_MANY_REQUESTS,
                Error("RATE_LIMITED", "Too many requests, please try again later"),
                headers={"Retry-After": str(decision.retry_after)},
            )

        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(self.limiter.max_requests)
        response.headers["X-RateLimit-Remaining"] = str(decision.remaining)
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers[name] = value
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({elapsed_ms:.1f}ms)"
        )
        return response


class UnexpectedErrorMiddleware(BaseHTTPMiddleware):
    """
    Turns unhandled exceptions into the JSON 500 body.

    Added innermost so the response still passes through the security
    header and CORS middlewares on its way out.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}")
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                Error("INTERNAL_ERROR", "Internal server error"),
            )
