# server/core/passwords.py

import logging
import secrets
from passlib.context import CryptContext
from passlib.exc import PasswordValueError
from core.errors import InvalidPasswordError


logger = logging.getLogger(__name__)

# bcrypt only reads this many bytes of the password
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """
    bcrypt hashing with a configurable work factor.

    The cost factor is embedded in every hash, so hashes produced under an
    earlier ``rounds`` setting keep verifying after it changes. Passwords
    bcrypt would truncate or reject are refused instead of hashed.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
            bcrypt__truncate_error=True,
        )
        # verified against when there is no stored hash, so every login costs one bcrypt round
        self._dummy_hash = self._context.hash(secrets.token_urlsafe(16))

    def hash(self, plaintext: str) -> str:
        if len(plaintext.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise InvalidPasswordError()
        try:
            return self._context.hash(plaintext)
        except PasswordValueError as e:
            raise InvalidPasswordError() from e

    def verify(self, plaintext: str, password_hash: str) -> bool:
        # no stored hash can match: such passwords are never hashed
        if len(plaintext.encode("utf-8")) > MAX_PASSWORD_BYTES:
            return False
        try:
            return self._context.verify(plaintext, password_hash)
        except PasswordValueError:
            return False
        except (ValueError, TypeError):
            logger.warning("Stored password hash could not be identified")
            return False

    def verify_dummy(self, plaintext: str) -> bool:
        """Burns the same bcrypt work as ``verify``; always False."""
        self.verify(plaintext, self._dummy_hash)
        return False
