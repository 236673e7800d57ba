import base64
import hashlib

import bcrypt

from src.app.services.password_hasher import IPasswordHasher

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """Credential hasher backed by bcrypt (salted, constant-time checkpw)"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))

    def hash(self, password: str) -> str:
        password_hash = bcrypt.hashpw(_prepare(password), bcrypt.gensalt(self.rounds))
        return password_hash.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_prepare(password), password_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            # Malformed stored hash
            return False

    def dummy_verify(self) -> None:
        bcrypt.checkpw(b"dummy_password", self._dummy_hash)


def _prepare(password: str) -> bytes:
    raw = password.encode("utf-8")
    if len(raw) <= BCRYPT_MAX_BYTES:
        return raw
    return base64.b64encode(hashlib.sha256(raw).digest())
