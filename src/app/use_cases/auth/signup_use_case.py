import logging

from sqlalchemy.exc import IntegrityError

from src.api.utils.jwt import generate_jwt
from src.app.services.passwords import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.domain.result import Error, Result, Return
from src.domain.validators import validate_credentials
from .dtos import AuthResponse, SignupCommand, UserInfo

logger = logging.getLogger(__name__)

USERNAME_TAKEN = Error("USERNAME_TAKEN", "Username already exists")


class SignupUseCase:
    """
    Signup Use Case

    Business Logic:
    1. Validate username and password (INVALID_INPUT)
    2. Reject a username that is already registered (USERNAME_TAKEN)
    3. Hash password with bcrypt
    4. Create User and commit
    5. Issue a 24-hour access token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SignupCommand) -> Result[AuthResponse]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with username and password

        Returns:
            Result[AuthResponse] with the new user and token,
            or Error(INVALID_INPUT / USERNAME_TAKEN)
        """
        error = validate_credentials(command.username, command.password)
        if error:
            return Return.err(error)

        async with self.uow:
            existing_user = await self.uow.users.get_by_username(command.username)
            if existing_user:
                return Return.err(USERNAME_TAKEN)

            user = User(
                username=command.username,
                password_hash=hash_password(command.password),
            )
            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                # Lost a race against a concurrent signup for the same name
                return Return.err(USERNAME_TAKEN)

            logger.info(f"User signed up: {user.id}")

            return Return.ok(
                AuthResponse(
                    message="Signup successful",
                    token=generate_jwt(user.id),
                    user=UserInfo(id=str(user.id), username=user.username),
                )
            )
