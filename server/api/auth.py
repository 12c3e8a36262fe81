# server/api/auth.py

from pydantic import BaseModel
from fastapi import APIRouter, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from database import get_db
from core.auth_service import AuthService
from core.errors import InvalidTokenError
from core.tokens import TokenClaims
from core.user_store import UserStore


router = APIRouter(prefix="/api/auth", tags=["auth"])

# auto_error is off so a missing header is reported as InvalidTokenError (401)
bearer_scheme = HTTPBearer(auto_error=False)


# -------------------------------
# Request / Response Schemas
# -------------------------------

class RegisterRequest(BaseModel):
    username: str
    email: str
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


class AuthResponse(BaseModel):
    token: str
    email: str


class CurrentUser(BaseModel):
    id: str
    email: str
    username: str


# -------------------------------
# Dependencies
# -------------------------------

def get_auth_service(request: Request, db: Session = Depends(get_db)) -> AuthService:
    state = request.app.state
    return AuthService(UserStore(db), state.hasher, state.token_issuer)


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenClaims:
    """
    Validates the bearer token on protected routes and returns its claims.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise InvalidTokenError("Not authenticated")
    return request.app.state.token_validator.validate(credentials.credentials)


# -------------------------------
# Endpoints
# -------------------------------

@router.post("/register", response_model=AuthResponse)
def register(req: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    result = service.register(req.username, req.email, req.password)
    return {"token": result.token, "email": result.email}


@router.post("/login", response_model=AuthResponse)
def login(req: LoginRequest, service: AuthService = Depends(get_auth_service)):
    result = service.login(req.email, req.password)
    return {"token": result.token, "email": result.email}


@router.get("/me", response_model=CurrentUser)
def read_current_user(current_user: TokenClaims = Depends(get_current_user)):
    return {"id": current_user.sub, "email": current_user.email, "username": current_user.username}
