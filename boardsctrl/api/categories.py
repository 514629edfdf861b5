"""Category endpoints: paginated list, get, create, partial update, toggle."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
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
from boardsctrl.models import Category
from boardsctrl.repositories.pagination import paginate
from boardsctrl.schemas.auth import CurrentAccount
from boardsctrl.schemas.categories import (
    CategoriesListResponse,
    CategoryCreate,
    CategoryOut,
    CategoryUpdate,
)

router = APIRouter()


@router.get("", response_model=CategoriesListResponse)
def list_categories(
    _account: Annotated[CurrentAccount, Depends(require_reader)],
    db: Annotated[Session, Depends(get_db)],
    params: Annotated[PageParams, Depends()],
) -> CategoriesListResponse:
    page = paginate(
        db.query(Category).order_by(Category.id), params.page_number, params.page_size
    )
    return CategoriesListResponse(
        **page_meta(page),
        categories=[CategoryOut.model_validate(c) for c in page.items],
    )


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(
    category_id: int,
    _account: Annotated[CurrentAccount, Depends(require_reader)],
    db: Annotated[Session, Depends(get_db)],
) -> CategoryOut:
    return CategoryOut.model_validate(get_or_404(db, Category, category_id, "Category"))


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(
    body: CategoryCreate,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> CategoryOut:
    category = Category(title=body.title, status=body.status)
    stamp_created(category, account.id)
    return CategoryOut.model_validate(save(db, category))


@router.patch("/{category_id}", response_model=CategoryOut)
def update_category(
    category_id: int,
    body: CategoryUpdate,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> CategoryOut:
    category = get_or_404(db, Category, category_id, "Category")
    apply_update(category, body)
    stamp_modified(category, account.id)
    return CategoryOut.model_validate(save(db, category))


@router.patch("/{category_id}/toggle", response_model=CategoryOut)
def toggle_category(
    category_id: int,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    activate: Annotated[bool | None, Query()] = None,
) -> CategoryOut:
    category = get_or_404(db, Category, category_id, "Category")
    return CategoryOut.model_validate(toggle_status(db, category, account.id, activate))
