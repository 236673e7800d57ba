"""
List Users Use Case
"""

from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import UserView


class ListUsersUseCase:
    """Returns every user, projected to UserView, in registration order."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[UserView]]:
        async with self.uow:
            users = await self.uow.users.list_all()
            return Return.ok([UserView.from_entity(user) for user in users])
