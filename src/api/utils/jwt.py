from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from config import ApplicationConfig

# Verification failure reasons
MALFORMED = "malformed"
BAD_SIGNATURE = "bad_signature"
EXPIRED = "expired"


@dataclass(frozen=True)
class TokenVerification:
    """Outcome of verify_jwt: either a user id or the reason it was rejected"""

    user_id: Optional[UUID] = None
    reason: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.user_id is not None


def generate_jwt(user_id: UUID) -> str:
    """
    Generate JWT access token

    Args:
        user_id: User UUID

    Returns:
        JWT token string (HS256, TOKEN_EXPIRY_HOURS expiry)
    """
    return create_access_token(
        str(user_id), timedelta(hours=ApplicationConfig.TOKEN_EXPIRY_HOURS)
    )


def create_access_token(user_id: str, expires_delta: timedelta) -> str:
    """
    Create JWT access token with custom expiry

    Args:
        user_id: User UUID as string
        expires_delta: Token expiration duration

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": user_id,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_jwt(token: str) -> TokenVerification:
    """
    Verify and decode JWT token

    Never raises; every failure is reported through the returned reason.

    Args:
        token: JWT token string

    Returns:
        TokenVerification with the embedded user id, or with reason
        malformed / bad_signature / expired
    """
    try:
        jwt.get_unverified_claims(token)
    except JWTError:
        return TokenVerification(reason=MALFORMED)

    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ApplicationConfig.JWT_ALGORITHM],
        )
    except ExpiredSignatureError:
        return TokenVerification(reason=EXPIRED)
    except JWTError:
        return TokenVerification(reason=BAD_SIGNATURE)

    try:
        user_id = UUID(str(payload["user_id"]))
    except (KeyError, ValueError):
        return TokenVerification(reason=MALFORMED)

    return TokenVerification(user_id=user_id)
