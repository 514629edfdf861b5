"""Helpers shared by the resource routers: lookup, audit stamping, status toggle, paging params."""

from datetime import UTC, datetime
from typing import Annotated, Any, TypeVar

from fastapi import HTTPException, Query, status
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from boardsctrl.core.config import get_settings
from boardsctrl.models import Base
from boardsctrl.repositories.pagination import Page

ModelT = TypeVar("ModelT", bound=Base)


class PageParams:
    """Query parameters for list endpoints (1-based page_number)."""

    def __init__(
        self,
        page_number: Annotated[int, Query(ge=1)] = 1,
        page_size: Annotated[int | None, Query(ge=1)] = None,
    ) -> None:
        settings = get_settings()
        self.page_number = page_number
        self.page_size = min(page_size or settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)


def page_meta(page: Page) -> dict[str, int]:
    return {
        "total": page.total,
        "page_number": page.page_number,
        "page_size": page.page_size,
        "total_pages": page.total_pages,
    }


def get_or_404(db: Session, model: type[ModelT], entity_id: int, label: str) -> ModelT:
    """Load a row by primary key or raise 404 with a readable message."""
    entity = db.get(model, entity_id)
    if entity is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label} {entity_id} not found.",
        )
    return entity


def stamp_created(entity: Any, account_id: int) -> None:
    entity.created_by_id = account_id
    entity.created_at = datetime.now(UTC)


def stamp_modified(entity: Any, account_id: int) -> None:
    """Record who changed the row and when. Every mutation calls this."""
    entity.modified_by_id = account_id
    entity.modified_at = datetime.now(UTC)


def apply_update(entity: Any, changes: BaseModel) -> list[str]:
    """Copy the fields the client actually sent onto the entity; return their names."""
    data = changes.model_dump(exclude_unset=True, exclude_none=True)
    for name, value in data.items():
        setattr(entity, name, value)
    return list(data)


def toggle_status(
    db: Session, entity: Any, account_id: int, activate: bool | None = None
) -> Any:
    """Set the active flag to `activate`, or flip it when None; stamp the modifier and persist."""
    entity.status = (not entity.status) if activate is None else activate
    stamp_modified(entity, account_id)
    db.commit()
    db.refresh(entity)
    return entity


def save(db: Session, entity: Any, conflict_detail: str = "Conflicting record.") -> Any:
    """Persist the entity. A unique-constraint violation becomes a 400 with `conflict_detail`."""
    db.add(entity)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=conflict_detail,
        ) from e
    db.refresh(entity)
    return entity
