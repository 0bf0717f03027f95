import logging
from typing import Any, Callable, Dict

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from hmacjwt.core.errors import InvalidToken, TokenExpired
from hmacjwt.jwt import JWT

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def bearer_claims(jwt: JWT) -> Callable[..., Dict[str, Any]]:
    """Build a dependency that returns verified claims from the bearer header."""

    def get_current_claims(
        credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    ) -> Dict[str, Any]:
        if credentials is None or credentials.scheme.lower() != "bearer":
            raise _unauthorized("missing bearer token")

        try:
            return jwt.verify(credentials.credentials)
        except TokenExpired:
            logger.info("bearer token rejected: TokenExpired")
            raise _unauthorized("token expired")
        except InvalidToken as exc:
            logger.info("bearer token rejected: %s", type(exc).__name__)
            raise _unauthorized("invalid token")

    return get_current_claims
