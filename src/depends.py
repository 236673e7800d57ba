from typing import Optional

from fastapi import Depends, Request, status

from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.session_cookie import read_session_token
from src.api.utils.store_timeout import with_store_timeout
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticateSessionUseCase, CurrentSession


def get_config(request: Request):
    """Configuration passed to create_app, shared by every request"""
    return request.app.state.config


def get_password_hasher(request: Request) -> IPasswordHasher:
    return request.app.state.password_hasher


async def get_unit_of_work(request: Request):
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_session_token(request: Request, config=Depends(get_config)) -> Optional[str]:
    return read_session_token(request, config)


async def require_session(
    session_token: Optional[str] = Depends(get_session_token),
    config=Depends(get_config),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> CurrentSession:
    """
    Dependency gating protected routes on a valid session cookie.

    Returns:
        CurrentSession with the user id the session was issued to

    Raises:
        ClientError: 403 if the cookie is missing, unknown or expired
    """
    use_case = AuthenticateSessionUseCase(uow, config.SESSION_SECRET)
    result = await with_store_timeout(
        use_case.execute(session_token), config.STORE_TIMEOUT_SECONDS
    )

    if result.is_err():
        raise ClientError(
            Error("UNAUTHORIZED", result.error.message),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    return result.value
