# server/core/tokens.py

"""
Bearer token issuance and validation.

Tokens are compact HS512 JWTs carrying ``sub`` (user id), ``email`` and
``username`` claims with a 24 hour lifetime. The signing key is injected at
construction; nothing here reads configuration.
"""

import logging
from datetime import datetime, timedelta, timezone
from jose import JWTError, ExpiredSignatureError, jwt
from pydantic import BaseModel, ValidationError
from core.errors import InvalidTokenError
from models.user import User


logger = logging.getLogger(__name__)

ALGORITHM = "HS512"
ACCESS_TOKEN_EXPIRE_HOURS = 24

# issuer and audience are not checked
_DECODE_OPTIONS = {
    "verify_aud": False,
    "verify_iss": False,
    "require_exp": True,
}


class TokenClaims(BaseModel):
    sub: str
    email: str
    username: str
    exp: int
    iat: int | None = None


class TokenIssuer:
    def __init__(self, secret_key: str, expires_delta: timedelta = timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS)):
        self._secret_key = secret_key
        self.expires_delta = expires_delta

    def issue(self, user: User, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        to_encode = {
            "sub": str(user.id),
            "email": user.email,
            "username": user.username,
            "iat": issued_at,
            "exp": issued_at + self.expires_delta,
        }
        return jwt.encode(to_encode, self._secret_key, algorithm=ALGORITHM)


class TokenValidator:
    def __init__(self, secret_key: str):
        self._secret_key = secret_key

    def validate(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry and return the embedded claims.
        Raises ``InvalidTokenError`` on any failure.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                options=_DECODE_OPTIONS,
            )
        except ExpiredSignatureError:
            raise InvalidTokenError("Token has expired")
        except JWTError as e:
            logger.debug("Rejected bearer token: %s", e)
            raise InvalidTokenError()

        try:
            return TokenClaims(**payload)
        except ValidationError:
            raise InvalidTokenError()
