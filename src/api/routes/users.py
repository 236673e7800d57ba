from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import ClientError, ServerError
from src.api.utils.store_timeout import with_store_timeout
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import CurrentSession
from src.app.use_cases.users import (
    DeleteUsersUseCase,
    ListUsersUseCase,
    SetBlockedUseCase,
    UserView,
)
from src.depends import get_config, get_unit_of_work, require_session
from src.domain.base import as_utc

router = APIRouter(tags=["Users"])


class UserResponse(BaseModel):
    """User row as shown in the management table"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    blocked: bool
    last_login: Optional[datetime] = Field(default=None, alias="lastLogin")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @classmethod
    def from_view(cls, view: UserView) -> "UserResponse":
        return cls(
            id=view.id,
            name=view.name,
            email=view.email,
            blocked=view.blocked,
            last_login=as_utc(view.last_login_at),
            created_at=as_utc(view.created_at),
        )


class UserIdsRequest(BaseModel):
    """Body of the bulk endpoints"""

    user_ids: List[str] = Field(default_factory=list, alias="userIds")


class BulkResponse(BaseModel):
    message: str
    count: int


@router.get("/users", status_code=status.HTTP_200_OK, response_model=List[UserResponse])
async def list_users(
    current_session: CurrentSession = Depends(require_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    List all users.

    Raises:
        - 403 Forbidden: No valid session
        - 500 Internal Server Error: Server error
    """
    use_case = ListUsersUseCase(uow)
    result = await with_store_timeout(use_case.execute(), config.STORE_TIMEOUT_SECONDS)

    if result.is_err():
        raise ServerError(result.error)

    return [UserResponse.from_view(view) for view in result.value]


async def _set_blocked(
    request: UserIdsRequest,
    blocked: bool,
    current_session: CurrentSession,
    uow: UnitOfWork,
    config,
) -> int:
    use_case = SetBlockedUseCase(uow)
    result = await with_store_timeout(
        use_case.execute(request.user_ids, blocked, requested_by=current_session.user_id),
        config.STORE_TIMEOUT_SECONDS,
    )

    if result.is_err():
        error = result.error
        if error.code == "NO_USERS_SELECTED":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value.affected


@router.post("/block", status_code=status.HTTP_200_OK, response_model=BulkResponse)
async def block_users(
    request: UserIdsRequest,
    current_session: CurrentSession = Depends(require_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    Block the given users. Unknown ids are skipped.

    Raises:
        - 400 Bad Request: No users selected
        - 403 Forbidden: No valid session
    """
    count = await _set_blocked(request, True, current_session, uow, config)
    return {"message": "Users blocked successfully", "count": count}


@router.post("/unblock", status_code=status.HTTP_200_OK, response_model=BulkResponse)
async def unblock_users(
    request: UserIdsRequest,
    current_session: CurrentSession = Depends(require_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    Unblock the given users. Unknown ids are skipped.

    Raises:
        - 400 Bad Request: No users selected
        - 403 Forbidden: No valid session
    """
    count = await _set_blocked(request, False, current_session, uow, config)
    return {"message": "Users unblocked successfully", "count": count}


@router.post("/users/delete", status_code=status.HTTP_200_OK, response_model=BulkResponse)
async def delete_users(
    request: UserIdsRequest,
    current_session: CurrentSession = Depends(require_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    Delete the given users. Unknown ids are skipped.

    Raises:
        - 400 Bad Request: No users selected
        - 403 Forbidden: No valid session
    """
    use_case = DeleteUsersUseCase(uow)
    result = await with_store_timeout(
        use_case.execute(request.user_ids, requested_by=current_session.user_id),
        config.STORE_TIMEOUT_SECONDS,
    )

    if result.is_err():
        error = result.error
        if error.code == "NO_USERS_SELECTED":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return {"message": "Users deleted successfully", "count": result.value.affected}
