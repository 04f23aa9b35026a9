"""
Login Use Case

Handles user authentication and token issuance.
"""

from typing import Optional

from src.api.utils.jwt import generate_jwt
from src.app.services.passwords import burn_password_check, verify_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return
from .dtos import AuthResponse, UserInfo


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Username and password must both be present
    - Unknown user and wrong password produce the same error
    - A dummy hash check runs for unknown users so timing does not leak
      which usernames exist
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, username: Optional[str], password: Optional[str]
    ) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            username: Username
            password: Plain text password

        Returns:
            Result with AuthResponse containing the token, or Error
        """
        if not username or not password:
            return Return.err(
                Error("INVALID_INPUT", "Username and password are required")
            )

        async with self.uow:
            user = await self.uow.users.get_by_username(username)

            if user is None:
                burn_password_check(password)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid username or password")
                )

            if not verify_password(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid username or password")
                )

            return Return.ok(
                AuthResponse(
                    message="Login successful",
                    token=generate_jwt(user.id),
                    user=UserInfo(id=str(user.id), username=user.username),
                )
            )
