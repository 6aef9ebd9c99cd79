import logging
from typing import Optional

from tasktracker.errors import Unauthenticated
from tasktracker.services.tokens import TokenExpired, TokenError, TokenInvalid, TokenService

logger = logging.getLogger(__name__)

NO_TOKEN = "No auth token provided"
TOKEN_EXPIRED = "Token has expired"
TOKEN_INVALID = "Invalid user auth token."
AUTH_ERROR = "An error occurred when reading the auth token."


class AuthGuard:
    """Resolve an ``Authorization`` header value to the caller's user id."""

    def __init__(self, tokens: TokenService):
        self.tokens = tokens

    def authenticate(self, authorization: Optional[str]) -> int:
        if authorization is None:
            raise Unauthenticated(NO_TOKEN)
        try:
            claims = self.tokens.verify(authorization)
        except TokenExpired:
            logger.debug("Rejected expired token")
            raise Unauthenticated(TOKEN_EXPIRED)
        except TokenInvalid as exc:
            logger.debug("Rejected invalid token: %s", exc)
            raise Unauthenticated(TOKEN_INVALID)
        except TokenError:
            raise Unauthenticated(AUTH_ERROR)
        return claims.subject
