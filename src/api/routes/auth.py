from datetime import timedelta
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import ClientError, ServerError
from src.api.utils.session_cookie import clear_session_cookie, set_session_cookie
from src.api.utils.store_timeout import with_store_timeout
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoginUseCase,
    LogoutUseCase,
    RegisterCommand,
    RegisterUseCase,
)
from src.depends import get_config, get_password_hasher, get_session_token, get_unit_of_work

router = APIRouter(tags=["Authentication"])

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class MessageResponse(BaseModel):
    message: str


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: str = Field(
        ..., min_length=3, max_length=255, pattern=EMAIL_PATTERN, description="User email address"
    )
    password: str = Field(..., min_length=1, description="User password")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=MessageResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
    config=Depends(get_config),
):
    """
    Register a new user.

    Raises:
        - 400 Bad Request: Missing or malformed fields
        - 409 Conflict: Email already exists
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        name=request.name, email=request.email, password=request.password
    )

    use_case = RegisterUseCase(uow, hasher)
    result = await with_store_timeout(
        use_case.execute(command), config.STORE_TIMEOUT_SECONDS
    )

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return {"message": "User registered successfully"}


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1, max_length=255, description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class LoginHttpResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    user_id: str = Field(..., alias="userId")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginHttpResponse)
async def login(
    request: LoginRequest,
    response: Response,
    session_token: Optional[str] = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
    config=Depends(get_config),
):
    """
    Authenticate and open a session.

    Sets the session cookie on success.

    Raises:
        - 401 Unauthorized: Unknown email or wrong password
        - 403 Forbidden: Account is blocked
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(
        uow,
        hasher,
        session_secret=config.SESSION_SECRET,
        session_ttl=timedelta(seconds=config.SESSION_TTL_SECONDS),
    )
    result = await with_store_timeout(
        use_case.execute(request.email, request.password, previous_token=session_token),
        config.STORE_TIMEOUT_SECONDS,
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "ACCOUNT_BLOCKED":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    data = result.value
    set_session_cookie(response, config, data.session_token, data.expires_at)
    return LoginHttpResponse(message="Login successful", user_id=data.user_id)


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(
    response: Response,
    session_token: Optional[str] = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    Destroy the current session and clear the cookie.

    Succeeds whether or not a session was present.
    """
    use_case = LogoutUseCase(uow, config.SESSION_SECRET)
    result = await with_store_timeout(
        use_case.execute(session_token), config.STORE_TIMEOUT_SECONDS
    )

    if result.is_err():
        raise ServerError(result.error)

    clear_session_cookie(response, config)
    return {"message": "Logged out successfully"}
