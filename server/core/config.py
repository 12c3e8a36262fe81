# server/core/config.py

import os
from dataclasses import dataclass
from dotenv import load_dotenv
from core.errors import ConfigError


DEFAULT_DATABASE_URL = "sqlite:///./bookquote.db"
DEFAULT_BCRYPT_ROUNDS = 12


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration, read once at startup and handed to the app factory.
    """
    jwt_secret_key: str
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS
    database_url: str = DEFAULT_DATABASE_URL
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"


def _parse_rounds(raw: str | None) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_BCRYPT_ROUNDS
    try:
        rounds = int(raw)
    except ValueError:
        raise ConfigError(f"BCRYPT_ROUNDS must be an integer, got {raw!r}")
    # bcrypt only accepts work factors in this range
    if not 4 <= rounds <= 31:
        raise ConfigError(f"BCRYPT_ROUNDS must be between 4 and 31, got {rounds}")
    return rounds


def load_settings() -> Settings:
    load_dotenv()

    secret_key = os.getenv("JWT_SECRET_KEY", "").strip()
    if not secret_key:
        raise ConfigError("JWT_SECRET_KEY is not set")

    origins = os.getenv("CORS_ORIGINS", "*")

    return Settings(
        jwt_secret_key=secret_key,
        bcrypt_rounds=_parse_rounds(os.getenv("BCRYPT_ROUNDS")),
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
