"""
Session Tokens

Opaque cookie tokens and the digest under which their sessions are stored.
"""

import hashlib
import hmac
import secrets


def generate_session_token() -> str:
    """Generate a cryptographically secure opaque token (43 chars)"""
    return secrets.token_urlsafe(32)


def hash_session_token(token: str, secret: str) -> str:
    """
    HMAC-SHA256 digest of a session token.

    Keyed by the session secret. The same token always maps to the same
    digest, which is the value sessions are looked up by.
    """
    return hmac.new(secret.encode(), token.encode(), hashlib.sha256).hexdigest()
