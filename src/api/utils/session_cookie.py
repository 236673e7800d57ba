"""
Session Cookie

Setting and clearing the cookie that carries the session token.
"""

from datetime import datetime
from typing import Optional

from fastapi import Request, Response

from src.domain.base import as_utc


def read_session_token(request: Request, config) -> Optional[str]:
    return request.cookies.get(config.SESSION_COOKIE_NAME) or None


def set_session_cookie(
    response: Response, config, session_token: str, expires_at: datetime
) -> None:
    """Max-Age and Expires both end when the stored session does"""
    response.set_cookie(
        key=config.SESSION_COOKIE_NAME,
        value=session_token,
        max_age=config.SESSION_TTL_SECONDS,
        expires=as_utc(expires_at),
        httponly=True,
        secure=config.SESSION_COOKIE_SECURE,
        samesite=config.SESSION_COOKIE_SAMESITE,
        path="/",
    )


def clear_session_cookie(response: Response, config) -> None:
    response.delete_cookie(
        key=config.SESSION_COOKIE_NAME,
        httponly=True,
        secure=config.SESSION_COOKIE_SECURE,
        samesite=config.SESSION_COOKIE_SAMESITE,
        path="/",
    )
