"""Slide endpoints: paginated list (all or by board), get, create, partial update, toggle."""

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
from boardsctrl.models import Board, Slide
from boardsctrl.repositories.pagination import paginate
from boardsctrl.schemas.auth import CurrentAccount
from boardsctrl.schemas.slides import SlideCreate, SlideOut, SlidesListResponse, SlideUpdate

router = APIRouter()


@router.get("", response_model=SlidesListResponse)
def list_slides(
    _account: Annotated[CurrentAccount, Depends(require_reader)],
    db: Annotated[Session, Depends(get_db)],
    params: Annotated[PageParams, Depends()],
) -> SlidesListResponse:
    page = paginate(db.query(Slide).order_by(Slide.id), params.page_number, params.page_size)
    return SlidesListResponse(
        **page_meta(page),
        slides=[SlideOut.model_validate(s) for s in page.items],
    )


@router.get("/by-board/{board_id}", response_model=SlidesListResponse)
def list_slides_by_board(
    board_id: int,
    _account: Annotated[CurrentAccount, Depends(require_reader)],
    db: Annotated[Session, Depends(get_db)],
    params: Annotated[PageParams, Depends()],
) -> SlidesListResponse:
    """Slides of one board in display order. 404 if the board has none."""
    query = db.query(Slide).filter(Slide.board_id == board_id).order_by(Slide.id)
    page = paginate(query, params.page_number, params.page_size)
    if page.total == 0:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No slides found for board {board_id}.",
        )
    return SlidesListResponse(
        **page_meta(page),
        slides=[SlideOut.model_validate(s) for s in page.items],
    )


@router.get("/{slide_id}", response_model=SlideOut)
def get_slide(
    slide_id: int,
    _account: Annotated[CurrentAccount, Depends(require_reader)],
    db: Annotated[Session, Depends(get_db)],
) -> SlideOut:
    return SlideOut.model_validate(get_or_404(db, Slide, slide_id, "Slide"))


@router.post("", response_model=SlideOut, status_code=status.HTTP_201_CREATED)
def create_slide(
    body: SlideCreate,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> SlideOut:
    if db.get(Board, body.board_id) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Board {body.board_id} does not exist.",
        )
    slide = Slide(
        board_id=body.board_id,
        title=body.title,
        url=body.url,
        time=body.time,
        status=body.status,
    )
    stamp_created(slide, account.id)
    return SlideOut.model_validate(save(db, slide))


@router.patch("/{slide_id}", response_model=SlideOut)
def update_slide(
    slide_id: int,
    body: SlideUpdate,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> SlideOut:
    slide = get_or_404(db, Slide, slide_id, "Slide")
    apply_update(slide, body)
    stamp_modified(slide, account.id)
    return SlideOut.model_validate(save(db, slide))


@router.patch("/{slide_id}/toggle", response_model=SlideOut)
def toggle_slide(
    slide_id: int,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    activate: Annotated[bool | None, Query()] = None,
) -> SlideOut:
    slide = get_or_404(db, Slide, slide_id, "Slide")
    return SlideOut.model_validate(toggle_status(db, slide, account.id, activate))
