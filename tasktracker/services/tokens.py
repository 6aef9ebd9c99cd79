"""Signed, time-limited bearer tokens.

Tokens are HS512 JWTs carrying the user id as ``sub`` and an absolute
``exp``. There is no revocation: a token stays valid until it expires.
"""
import time
from dataclasses import dataclass
from typing import Callable

from jose import jwt, JWTError

from tasktracker.config import ConfigError

ALGORITHM = "HS512"
TOKEN_TTL_SECONDS = 3600
BEARER_PREFIX = "bearer "


class TokenError(Exception):
    """Base class for tokens that cannot be accepted."""


class TokenExpired(TokenError):
    pass


class TokenInvalid(TokenError):
    pass


@dataclass(frozen=True)
class Claims:
    subject: int
    expiry: int


def strip_bearer(value: str) -> str:
    value = value.strip()
    if value[: len(BEARER_PREFIX)].lower() == BEARER_PREFIX:
        return value[len(BEARER_PREFIX):].strip()
    return value


class TokenService:
    def __init__(self, secret: str, ttl_seconds: int = TOKEN_TTL_SECONDS, clock: Callable[[], float] = time.time):
        if not secret:
            raise ConfigError("token signing secret is not configured")
        self._secret = secret
        self._ttl = ttl_seconds
        self._clock = clock

    def __repr__(self):
        return f"TokenService(algorithm={ALGORITHM!r}, ttl_seconds={self._ttl})"

    def issue(self, user_id: int) -> str:
        expire = int(self._clock()) + self._ttl
        # python-jose insists on a string subject
        return jwt.encode({"sub": str(user_id), "exp": expire}, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Claims:
        """Return the token's claims or raise TokenExpired / TokenInvalid."""
        token = strip_bearer(token)
        if not token:
            raise TokenInvalid("empty token")
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            raise TokenInvalid(str(exc))

        try:
            subject = int(payload["sub"])
            expiry = int(payload["exp"])
        except (KeyError, TypeError, ValueError):
            raise TokenInvalid("token claims are malformed")

        # the signature is valid at this point; expiry is checked last
        if expiry <= self._clock():
            raise TokenExpired("token has expired")
        return Claims(subject=subject, expiry=expiry)
