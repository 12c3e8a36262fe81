# server/core/auth_service.py

import logging
from dataclasses import dataclass
from core.errors import DuplicateUserError, InvalidCredentialsError
from core.passwords import PasswordHasher
from core.tokens import TokenIssuer
from core.user_store import UserStore


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    token: str
    email: str


class AuthService:
    """
    Register and login flows.

    Failures surface immediately as ``DuplicateUserError``,
    ``InvalidCredentialsError``, ``InvalidPasswordError`` or ``StoreError``; nothing is retried.
    """

    def __init__(self, store: UserStore, hasher: PasswordHasher, issuer: TokenIssuer):
        self.store = store
        self.hasher = hasher
        self.issuer = issuer

    def register(self, username: str, email: str, password: str) -> AuthResult:
        if self.store.get_by_email(email) is not None:
            raise DuplicateUserError()

        password_hash = self.hasher.hash(password)
        # a concurrent registration can still win here; the store reports it as a duplicate
        user = self.store.add(username=username, email=email, password_hash=password_hash)

        logger.info("Registered user %s (%s)", user.id, user.email)
        return AuthResult(token=self.issuer.issue(user), email=user.email)

    def login(self, email: str, password: str) -> AuthResult:
        user = self.store.get_by_email(email)
        if user is None:
            # same bcrypt cost as a wrong password, so timing does not reveal unknown emails
            self.hasher.verify_dummy(password)
            logger.info("Rejected login for %s", email)
            raise InvalidCredentialsError()
        if not self.hasher.verify(password, user.password_hash):
            logger.info("Rejected login for %s", email)
            raise InvalidCredentialsError()

        logger.info("Login: %s (%s)", user.id, user.email)
        return AuthResult(token=self.issuer.issue(user), email=user.email)
