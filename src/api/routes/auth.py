from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    DeleteAccountResponse,
    DeleteAccountUseCase,
    LoginUseCase,
    SignupCommand,
    SignupUseCase,
    VerifyTokenResponse,
)
from src.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class CredentialsRequest(BaseModel):
    """
    Signup / login HTTP request payload

    Presence and format rules are enforced by the use cases so that a
    missing field is reported as a 400 with a readable message.
    """

    username: Optional[str] = Field(None, description="3-50 chars, letters, digits, underscore")
    password: Optional[str] = Field(None, description="At least 6 characters")


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def signup(request: CredentialsRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Signup

    Creates a new account and returns an access token valid for 24 hours.

    Raises:
        - 400 Bad Request: Invalid username/password or username taken
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(username=request.username, password=request.password)

    use_case = SignupUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_INPUT", "USERNAME_TAKEN"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(request: CredentialsRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 400 Bad Request: Username or password missing
        - 401 Unauthorized: Invalid credentials
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.username, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_INPUT":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


@router.post("/verify", status_code=status.HTTP_200_OK, response_model=VerifyTokenResponse)
async def verify(user_id: UUID = Depends(get_current_user_id)):
    """Confirms the bearer token is valid and returns its user id"""
    return VerifyTokenResponse(user_id=str(user_id))


@router.delete("/account", status_code=status.HTTP_200_OK, response_model=DeleteAccountResponse)
async def delete_account(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Own Account

    Removes the user with their posts, likes and chat messages. Tokens
    already issued remain valid until they expire.

    Raises:
        - 401 / 403: Missing or invalid token
        - 404 Not Found: Account already deleted
        - 500 Internal Server Error: Server error
    """
    use_case = DeleteAccountUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
