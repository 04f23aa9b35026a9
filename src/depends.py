import logging
from uuid import UUID

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import BAD_SIGNATURE, EXPIRED, MALFORMED, verify_jwt
from src.domain.result import Error

logger = logging.getLogger(__name__)

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)


def enable_sqlite_foreign_keys(async_engine) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection"""
    if async_engine.dialect.name != "sqlite":
        return

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


enable_sqlite_foreign_keys(engine)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)

_TOKEN_ERRORS = {
    MALFORMED: Error("TOKEN_MALFORMED", "Invalid or expired token"),
    BAD_SIGNATURE: Error("TOKEN_INVALID", "Invalid or expired token"),
    EXPIRED: Error("TOKEN_EXPIRED", "Invalid or expired token"),
}
_INVALID_TOKEN = _TOKEN_ERRORS[BAD_SIGNATURE]


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user_id(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> UUID:
    """
    Dependency to extract and verify the bearer token from the Authorization header.

    Args:
        request: Incoming request; the user id is bound to request.state
        credentials: Bearer token from Authorization header, None when absent

    Returns:
        Authenticated user id

    Raises:
        ClientError: 401 if no bearer token was sent,
            403 if the token is malformed, tampered with or expired
    """
    if credentials is None:
        logger.warning(f"Missing bearer token: {request.method} {request.url.path}")
        raise ClientError(
            Error("AUTH_REQUIRED", "Authentication token required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    verification = verify_jwt(credentials.credentials)
    if not verification.is_valid:
        logger.warning(
            f"Rejected token ({verification.reason}): {request.method} {request.url.path}"
        )
        raise ClientError(
            _TOKEN_ERRORS.get(verification.reason, _INVALID_TOKEN),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    request.state.user_id = verification.user_id
    return verification.user_id
