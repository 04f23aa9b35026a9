"""
Authentication Use Cases

Signup, login and account deletion.
"""

from .signup_use_case import SignupUseCase
from .login_use_case import LoginUseCase
from .delete_account_use_case import DeleteAccountUseCase
from .dtos import (
    AuthResponse,
    DeleteAccountResponse,
    SignupCommand,
    UserInfo,
    VerifyTokenResponse,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "LoginUseCase",
    "DeleteAccountUseCase",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "AuthResponse",
    "DeleteAccountResponse",
    "VerifyTokenResponse",
    # DTOs - Nested Models
    "UserInfo",
]
