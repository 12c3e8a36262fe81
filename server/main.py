# server/main.py

import logging
import sys
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from api import auth, books, quotes
from core.config import Settings, load_settings
from core.errors import (
    BookQuoteError,
    DuplicateUserError,
    InvalidCredentialsError,
    InvalidPasswordError,
    InvalidTokenError,
    StoreError,
)
from core.passwords import PasswordHasher
from core.tokens import TokenIssuer, TokenValidator
from database import create_db_engine, create_session_factory, init_db


logger = logging.getLogger(__name__)

ERROR_STATUS = {
    DuplicateUserError: 400,
    InvalidCredentialsError: 400,
    InvalidPasswordError: 400,
    StoreError: 400,
    InvalidTokenError: 401,
}


def configure_logging(level: str):
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
        stream=sys.stdout,
    )
    for noisy in ("passlib", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


# -------------------------------
# Error Responses
# -------------------------------

def handle_app_error(request: Request, exc: BookQuoteError):
    status_code = ERROR_STATUS.get(type(exc), 400)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content={"message": exc.message}, headers=headers)


def handle_validation_error(request: Request, exc: RequestValidationError):
    # location and reason only; submitted values may include a password
    problems = [
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"message": "Invalid request: " + "; ".join(problems)})


def handle_http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


# -------------------------------
# App Factory
# -------------------------------

def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Builds the API. Without explicit settings they are read from the
    environment, and a missing JWT_SECRET_KEY aborts startup with ConfigError.
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    engine = create_db_engine(settings.database_url)
    init_db(engine)

    app = FastAPI(title="Book Quote API")

    app.state.settings = settings
    app.state.session_factory = create_session_factory(engine)
    app.state.hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.token_issuer = TokenIssuer(settings.jwt_secret_key)
    app.state.token_validator = TokenValidator(settings.jwt_secret_key)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(BookQuoteError, handle_app_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    app.include_router(auth.router)
    app.include_router(books.router)
    app.include_router(quotes.router)

    logger.info("Book Quote API ready (bcrypt rounds=%d)", settings.bcrypt_rounds)
    return app


if __name__ == "__main__":
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
