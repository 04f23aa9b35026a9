from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from .error import ClientError, ServerError, error_response
from .middleware import (
    RateLimitMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
    UnexpectedErrorMiddleware,
)
from src.adapter.services.in_memory_rate_limiter import InMemoryRateLimiter
from src.app.services.rate_limiter import RateLimiter
from src.domain.result import Error
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.base_error.code} - {exc.base_error.message}")
    return error_response(exc.status_code, exc.base_error)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} - {exc.base_error.message}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        Error(exc.base_error.code, "Internal server error"),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    field = ".".join(str(part) for part in errors[0]["loc"]) if errors else "body"
    logger.warning(f"Request validation failed at {field}")
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        Error("INVALID_INPUT", f"Invalid request: {field}"),
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        error = Error("NOT_FOUND", "API endpoint not found")
    else:
        error = Error("HTTP_ERROR", str(exc.detail))
    return error_response(exc.status_code, error, headers=getattr(exc, "headers", None))


@asynccontextmanager
async def lifespan(app: FastAPI):
    from src.depends import engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database schema ready")
    yield
    await engine.dispose()


def create_app(ApplicationConfig, rate_limiter: Optional[RateLimiter] = None) -> FastAPI:
    app = FastAPI(title="StockTalk API", version="0.1.0", lifespan=lifespan)

    if rate_limiter is None:
        rate_limiter = InMemoryRateLimiter(
            window_seconds=ApplicationConfig.RATE_LIMIT_WINDOW_SECONDS,
            max_requests=ApplicationConfig.RATE_LIMIT_MAX_REQUESTS,
        )

    # Last added runs first: CORS, security headers, logging, rate limit,
    # unexpected errors
    app.add_middleware(UnexpectedErrorMiddleware)
    app.add_middleware(
        RateLimitMiddleware,
        limiter=rate_limiter,
        client_ip_header=ApplicationConfig.CLIENT_IP_HEADER,
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)
    if ApplicationConfig.ENABLE_SECURITY_HEADERS:
        app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=3600,
    )

    from src.api.routes import auth, chats, health_check, posts

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=ApplicationConfig.API_PREFIX, tags=["Authentication"])
    app.include_router(posts.router, prefix=ApplicationConfig.API_PREFIX, tags=["Posts"])
    app.include_router(chats.router, prefix=ApplicationConfig.API_PREFIX, tags=["Chats"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)

    return app
