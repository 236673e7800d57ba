"""
Use Cases

Organized into domain folders:
- auth/: Registration, login, logout, session checks
- users/: User management

Import from subdirectories for better organization.
"""

from .auth import (
    AuthenticateSessionUseCase,
    LoginUseCase,
    LogoutUseCase,
    RegisterCommand,
    RegisterUseCase,
)
from .users import (
    DeleteUsersUseCase,
    ListUsersUseCase,
    SetBlockedUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "RegisterCommand",
    "LoginUseCase",
    "LogoutUseCase",
    "AuthenticateSessionUseCase",
    # Users
    "ListUsersUseCase",
    "SetBlockedUseCase",
    "DeleteUsersUseCase",
]
