"""
Delete Users Use Case

Physically deletes a set of users in one statement.
"""

import logging
from typing import List, Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import BulkUpdateResponse
from .user_ids import NO_USERS_SELECTED, parse_user_ids

logger = logging.getLogger(__name__)


class DeleteUsersUseCase:
    """
    Use case for bulk deletion.

    Business Rules:
    - An empty id list is rejected (NO_USERS_SELECTED)
    - Ids that do not exist are skipped without error
    - No soft delete
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_ids: List[str], requested_by: Optional[str] = None
    ) -> Result[BulkUpdateResponse]:
        if not user_ids:
            return Return.err(NO_USERS_SELECTED)

        ids = parse_user_ids(user_ids)

        async with self.uow:
            affected = await self.uow.users.delete_by_ids(ids) if ids else 0
            await self.uow.commit()

        logger.info(
            f"Deleted {affected} of {len(user_ids)} user(s), requested by {requested_by}"
        )
        return Return.ok(BulkUpdateResponse(requested=len(user_ids), affected=affected))
