from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import os


logger = logging.getLogger(__name__)

_ALGORITHM = "sha256"
_DEFAULT_ITERATIONS = 390_000
_SALT_BYTES = 16


def hash_password(raw_password: str, *, iterations: int = _DEFAULT_ITERATIONS) -> str:
    salt = os.urandom(_SALT_BYTES)
    digest = hashlib.pbkdf2_hmac(_ALGORITHM, raw_password.encode("utf-8"), salt, iterations)
    salt_b64 = base64.b64encode(salt).decode("ascii")
    digest_b64 = base64.b64encode(digest).decode("ascii")
    return f"pbkdf2_{_ALGORITHM}${iterations}${salt_b64}${digest_b64}"


def verify_password(raw_password: str, encoded_hash: str) -> bool:
    try:
        scheme, iter_s, salt_b64, digest_b64 = encoded_hash.split("$", 3)
        if scheme != f"pbkdf2_{_ALGORITHM}":
            return False
        iterations = int(iter_s)
        salt = base64.b64decode(salt_b64.encode("ascii"))
        expected = base64.b64decode(digest_b64.encode("ascii"))
    except (ValueError, TypeError):
        return False

    actual = hashlib.pbkdf2_hmac(_ALGORITHM, raw_password.encode("utf-8"), salt, iterations)
    return hmac.compare_digest(actual, expected)


class AuthGate:
    """Single-account login check in front of the budget editor."""

    def __init__(self, email: str, password_hash: str):
        self._email: str = (email or "").strip().lower()
        self._password_hash: str = password_hash
        self._authenticated: bool = False

    @classmethod
    def from_plain(cls, email: str, raw_password: str, *, iterations: int = _DEFAULT_ITERATIONS) -> "AuthGate":
        return cls(email, hash_password(raw_password, iterations=iterations))

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    def authenticate(self, email: str, password: str) -> bool:
        normalized = (email or "").strip().lower()
        ok = (
            bool(normalized)
            and hmac.compare_digest(normalized.encode("utf-8"), self._email.encode("utf-8"))
            and verify_password(password or "", self._password_hash)
        )
        self._authenticated = ok
        if ok:
            logger.info("Login accepted for %s", normalized)
        else:
            logger.warning("Login rejected for %s", normalized or "<empty>")
        return ok

    def logout(self) -> None:
        self._authenticated = False


__all__ = ["AuthGate", "hash_password", "verify_password"]
