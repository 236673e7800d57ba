"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes shared by login, logout and session checks.
"""

from datetime import datetime

from pydantic import BaseModel


class LoginResponse(BaseModel):
    """
    Response for user login use case

    session_token is the plaintext cookie value; it is never stored.
    """

    user_id: str
    session_token: str
    expires_at: datetime


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    session_destroyed: bool


class CurrentSession(BaseModel):
    """Resolved session attached to an authenticated request"""

    user_id: str
