"""User administration endpoints: paginated list, get, create, partial update, toggle."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from boardsctrl.api.auth import get_auth_service, require_admin, require_reader
from boardsctrl.api.common import (
    PageParams,
    apply_update,
    get_or_404,
    page_meta,
    save,
    stamp_modified,
    toggle_status,
)
from boardsctrl.core.database import get_db
from boardsctrl.models import Role, User
from boardsctrl.repositories.pagination import paginate
from boardsctrl.schemas.auth import CurrentAccount
from boardsctrl.schemas.users import UserCreate, UserOut, UsersListResponse, UserUpdate
from boardsctrl.services.auth_service import (
    FAILURE_MESSAGES,
    ROLE_NOT_FOUND_MESSAGE,
    AuthFailure,
    AuthService,
    Rejected,
)

router = APIRouter()

USERNAME_TAKEN = FAILURE_MESSAGES[AuthFailure.DUPLICATE_USERNAME]


def _ensure_username_free(db: Session, username: str, exclude_id: int | None = None) -> None:
    query = db.query(User.id).filter(User.username == username)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    if query.first() is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=USERNAME_TAKEN,
        )


def _ensure_role(db: Session, role_id: int) -> None:
    if db.get(Role, role_id) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ROLE_NOT_FOUND_MESSAGE,
        )


@router.get("", response_model=UsersListResponse)
def list_users(
    _account: Annotated[CurrentAccount, Depends(require_reader)],
    db: Annotated[Session, Depends(get_db)],
    params: Annotated[PageParams, Depends()],
) -> UsersListResponse:
    page = paginate(db.query(User).order_by(User.id), params.page_number, params.page_size)
    return UsersListResponse(
        **page_meta(page),
        users=[UserOut.model_validate(u) for u in page.items],
    )


@router.get("/{user_id}", response_model=UserOut)
def get_user(
    user_id: int,
    _account: Annotated[CurrentAccount, Depends(require_reader)],
    db: Annotated[Session, Depends(get_db)],
) -> UserOut:
    return UserOut.model_validate(get_or_404(db, User, user_id, "User"))


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreate,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    service: Annotated[AuthService, Depends(get_auth_service)],
    db: Annotated[Session, Depends(get_db)],
) -> UserOut:
    """Create an account. Without a password it can only log in through the legacy service."""
    result = service.register(
        body.username,
        body.password,
        body.email,
        body.role_id,
        created_by_id=account.id,
    )
    if isinstance(result, Rejected):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.message)
    return UserOut.model_validate(get_or_404(db, User, result.account_id, "User"))


@router.patch("/{user_id}", response_model=UserOut)
def update_user(
    user_id: int,
    body: UserUpdate,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserOut:
    user = get_or_404(db, User, user_id, "User")
    if body.username is not None:
        _ensure_username_free(db, body.username, exclude_id=user_id)
    if body.role_id is not None:
        _ensure_role(db, body.role_id)
    apply_update(user, body)
    stamp_modified(user, account.id)
    return UserOut.model_validate(save(db, user, USERNAME_TAKEN))


@router.patch("/{user_id}/toggle", response_model=UserOut)
def toggle_user(
    user_id: int,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    activate: Annotated[bool | None, Query()] = None,
) -> UserOut:
    """Deactivated users can no longer log in; tokens already issued stay valid until expiry."""
    user = get_or_404(db, User, user_id, "User")
    return UserOut.model_validate(toggle_status(db, user, account.id, activate))
