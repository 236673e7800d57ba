"""
User Management Use Cases

Listing, blocking, unblocking and deleting users.
"""

from .list_users_use_case import ListUsersUseCase
from .set_blocked_use_case import SetBlockedUseCase
from .delete_users_use_case import DeleteUsersUseCase
from .dtos import BulkUpdateResponse, UserView

__all__ = [
    "ListUsersUseCase",
    "SetBlockedUseCase",
    "DeleteUsersUseCase",
    "BulkUpdateResponse",
    "UserView",
]
