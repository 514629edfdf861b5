"""Register/login endpoints and the access-control dependencies (get_current_account, require_roles)."""

import logging
from collections.abc import Callable
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from boardsctrl.core.config import Settings, get_settings
from boardsctrl.core.database import get_db
from boardsctrl.core.security import decode_access_token
from boardsctrl.repositories.accounts import AccountRepository, SqlAccountRepository
from boardsctrl.schemas.auth import (
    CurrentAccount,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
)
from boardsctrl.services.auth_service import (
    LOGIN_SUCCESS_MESSAGE,
    REGISTER_SUCCESS_MESSAGE,
    AuthService,
    Rejected,
)
from boardsctrl.services.legacy_auth import IdentityVerifier, LegacyIdentityVerifier

logger = logging.getLogger(__name__)
router = APIRouter()

ROLE_ADMIN = "Admin"
ROLE_USER = "User"
READ_ROLES = frozenset({ROLE_ADMIN, ROLE_USER})
WRITE_ROLES = frozenset({ROLE_ADMIN})

# The raw token goes in the Authorization header; a "Bearer " prefix is tolerated.
authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="JWT from POST /auth/login. Just the token; no 'Bearer ' prefix needed.",
)


def get_account_repository(
    db: Annotated[Session, Depends(get_db)],
) -> AccountRepository:
    return SqlAccountRepository(db)


def get_identity_verifier(
    settings: Annotated[Settings, Depends(get_settings)],
) -> IdentityVerifier:
    return LegacyIdentityVerifier(settings)


def get_auth_service(
    accounts: Annotated[AccountRepository, Depends(get_account_repository)],
    verifier: Annotated[IdentityVerifier, Depends(get_identity_verifier)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    return AuthService(accounts, verifier, settings)


@router.post("/register", response_model=MessageResponse)
def register(
    body: RegisterRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse:
    """Create an active account with a local password. 400 if the username is taken."""
    result = service.register(body.username, body.password, body.email, body.role)
    if isinstance(result, Rejected):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.message)
    return MessageResponse(message=REGISTER_SUCCESS_MESSAGE)


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT.
    The account must be active, match its local password (if one is stored),
    have a role, and be accepted by the legacy identity service.
    Send the token as the Authorization header on every other endpoint.
    """
    result = await service.login(body.username, body.password)
    if isinstance(result, Rejected):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=result.message)
    return LoginResponse(
        token=result.token,
        username=result.username,
        role=result.role_name,
        account_id=result.account_id,
        message=LOGIN_SUCCESS_MESSAGE,
    )


def _unauthenticated(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_account(
    authorization: Annotated[str | None, Depends(authorization_header)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CurrentAccount:
    """
    Dependency: require a valid token and return the identity in its claims.
    Raises 401 if the token is missing, badly signed, expired, or for another issuer/audience.
    """
    token = (authorization or "").strip()
    if token[:7].lower() == "bearer ":
        token = token[7:].strip()
    if not token:
        raise _unauthenticated("Not authenticated")
    try:
        payload = decode_access_token(token, settings=settings)
    except jwt.ExpiredSignatureError:
        raise _unauthenticated("Token expired")
    except jwt.PyJWTError:
        raise _unauthenticated("Invalid token")

    username = payload.get("sub")
    account_id = payload.get("account_id")
    role = payload.get("role")
    if not username or not isinstance(account_id, int) or not isinstance(role, str) or not role:
        raise _unauthenticated("Invalid token payload")
    return CurrentAccount(id=account_id, username=username, role=role)


def require_roles(*roles: str) -> Callable[..., CurrentAccount]:
    """
    Build a dependency that admits only tokens whose role claim is in `roles`.
    Authentication failures stay 401; a valid token with another role gets 403.
    """
    allowed = frozenset(roles)

    def dependency(
        current: Annotated[CurrentAccount, Depends(get_current_account)],
    ) -> CurrentAccount:
        if current.role not in allowed:
            logger.warning(
                "Access denied for role",
                extra={"account_id": current.id, "role": current.role},
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient role for this operation",
            )
        return current

    return dependency


require_reader = require_roles(*READ_ROLES)
require_admin = require_roles(*WRITE_ROLES)
