# server/core/errors.py

"""
Error taxonomy shared by the auth core and the HTTP layer.

Each per-request error carries a short, client-safe message; ``main.py``
maps them onto status codes.
"""


class BookQuoteError(Exception):
    message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class DuplicateUserError(BookQuoteError):
    message = "User already exists"


class InvalidCredentialsError(BookQuoteError):
    message = "Invalid email or password"


class InvalidPasswordError(BookQuoteError):
    message = "Password must be at most 72 bytes and must not contain NUL characters"


class InvalidTokenError(BookQuoteError):
    message = "Could not validate credentials"


class StoreError(BookQuoteError):
    message = "Could not save user"


class ConfigError(BookQuoteError):
    """Raised at startup when required configuration is missing or unusable."""
    message = "Invalid configuration"
