"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the account domain.
"""

from typing import Optional
from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class SignupCommand(BaseModel):
    """
    Signup command - raw signup intent

    Fields stay optional so missing values reach the input validators and
    come back as INVALID_INPUT instead of a schema error.
    """

    username: Optional[str] = None
    password: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """User information in authentication responses"""

    id: str
    username: str


class AuthResponse(BaseModel):
    """Response for signup and login use cases"""

    success: bool = True
    message: str
    token: str
    user: UserInfo


class VerifyTokenResponse(BaseModel):
    """Response for token verification"""

    success: bool = True
    user_id: str


class DeleteAccountResponse(BaseModel):
    """Response for account deletion use case"""

    success: bool = True
    message: str
