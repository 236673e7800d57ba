"""
Authentication Use Cases

Registration, login, logout and session checks.
"""

from .register_use_case import RegisterUseCase
from .register_dto import RegisterCommand, RegisterResponse
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .authenticate_session_use_case import AuthenticateSessionUseCase
from .dtos import CurrentSession, LoginResponse, LogoutResponse

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "AuthenticateSessionUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "RegisterResponse",
    "LoginResponse",
    "LogoutResponse",
    "CurrentSession",
]
