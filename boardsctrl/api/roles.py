"""Role endpoints: paginated list, get, create, partial update, toggle."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from boardsctrl.api.auth import require_admin, require_reader
from boardsctrl.api.common import (
    PageParams,
    apply_update,
    get_or_404,
    page_meta,
    save,
    stamp_created,
    stamp_modified,
    toggle_status,
)
from boardsctrl.core.database import get_db
from boardsctrl.models import Role
from boardsctrl.repositories.pagination import paginate
from boardsctrl.schemas.auth import CurrentAccount
from boardsctrl.schemas.roles import RoleCreate, RoleOut, RolesListResponse, RoleUpdate

router = APIRouter()

ROLE_NAME_TAKEN = "A role with this name already exists."


def _ensure_name_free(db: Session, name: str, exclude_id: int | None = None) -> None:
    query = db.query(Role.id).filter(Role.name == name)
    if exclude_id is not None:
        query = query.filter(Role.id != exclude_id)
    if query.first() is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ROLE_NAME_TAKEN,
        )


@router.get("", response_model=RolesListResponse)
def list_roles(
    _account: Annotated[CurrentAccount, Depends(require_reader)],
    db: Annotated[Session, Depends(get_db)],
    params: Annotated[PageParams, Depends()],
) -> RolesListResponse:
    page = paginate(db.query(Role).order_by(Role.id), params.page_number, params.page_size)
    return RolesListResponse(
        **page_meta(page),
        roles=[RoleOut.model_validate(r) for r in page.items],
    )


@router.get("/{role_id}", response_model=RoleOut)
def get_role(
    role_id: int,
    _account: Annotated[CurrentAccount, Depends(require_reader)],
    db: Annotated[Session, Depends(get_db)],
) -> RoleOut:
    return RoleOut.model_validate(get_or_404(db, Role, role_id, "Role"))


@router.post("", response_model=RoleOut, status_code=status.HTTP_201_CREATED)
def create_role(
    body: RoleCreate,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> RoleOut:
    _ensure_name_free(db, body.name)
    role = Role(name=body.name, status=True)
    stamp_created(role, account.id)
    return RoleOut.model_validate(save(db, role, ROLE_NAME_TAKEN))


@router.patch("/{role_id}", response_model=RoleOut)
def update_role(
    role_id: int,
    body: RoleUpdate,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> RoleOut:
    role = get_or_404(db, Role, role_id, "Role")
    if body.name is not None:
        _ensure_name_free(db, body.name, exclude_id=role_id)
    apply_update(role, body)
    stamp_modified(role, account.id)
    return RoleOut.model_validate(save(db, role, ROLE_NAME_TAKEN))


@router.patch("/{role_id}/toggle", response_model=RoleOut)
def toggle_role(
    role_id: int,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    activate: Annotated[bool | None, Query()] = None,
) -> RoleOut:
    """Flip the active flag, or set it explicitly with ?activate=true|false."""
    role = get_or_404(db, Role, role_id, "Role")
    return RoleOut.model_validate(toggle_status(db, role, account.id, activate))
