"""Board endpoints: paginated list (all or by category), get, create, partial update, toggle."""

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
from boardsctrl.models import Board, Category
from boardsctrl.repositories.pagination import paginate
from boardsctrl.schemas.auth import CurrentAccount
from boardsctrl.schemas.boards import BoardCreate, BoardOut, BoardsListResponse, BoardUpdate

router = APIRouter()


def _ensure_title_free(
    db: Session, title: str, category_id: int, exclude_id: int | None = None
) -> None:
    """Board titles are unique within a category."""
    query = db.query(Board.id).filter(Board.title == title, Board.category_id == category_id)
    if exclude_id is not None:
        query = query.filter(Board.id != exclude_id)
    if query.first() is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A board with this title already exists in the category.",
        )


def _ensure_category(db: Session, category_id: int) -> None:
    if db.get(Category, category_id) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Category {category_id} does not exist.",
        )


@router.get("", response_model=BoardsListResponse)
def list_boards(
    _account: Annotated[CurrentAccount, Depends(require_reader)],
    db: Annotated[Session, Depends(get_db)],
    params: Annotated[PageParams, Depends()],
) -> BoardsListResponse:
    page = paginate(db.query(Board).order_by(Board.id), params.page_number, params.page_size)
    return BoardsListResponse(
        **page_meta(page),
        boards=[BoardOut.model_validate(b) for b in page.items],
    )


@router.get("/by-category/{category_id}", response_model=BoardsListResponse)
def list_boards_by_category(
    category_id: int,
    _account: Annotated[CurrentAccount, Depends(require_reader)],
    db: Annotated[Session, Depends(get_db)],
    params: Annotated[PageParams, Depends()],
) -> BoardsListResponse:
    """Boards in one category. 404 if the category has no boards at all."""
    query = db.query(Board).filter(Board.category_id == category_id).order_by(Board.id)
    page = paginate(query, params.page_number, params.page_size)
    if page.total == 0:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No boards found for category {category_id}.",
        )
    return BoardsListResponse(
        **page_meta(page),
        boards=[BoardOut.model_validate(b) for b in page.items],
    )


@router.get("/{board_id}", response_model=BoardOut)
def get_board(
    board_id: int,
    _account: Annotated[CurrentAccount, Depends(require_reader)],
    db: Annotated[Session, Depends(get_db)],
) -> BoardOut:
    return BoardOut.model_validate(get_or_404(db, Board, board_id, "Board"))


@router.post("", response_model=BoardOut, status_code=status.HTTP_201_CREATED)
def create_board(
    body: BoardCreate,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> BoardOut:
    _ensure_category(db, body.category_id)
    _ensure_title_free(db, body.title, body.category_id)
    board = Board(
        category_id=body.category_id,
        title=body.title,
        description=body.description,
        status=body.status,
    )
    stamp_created(board, account.id)
    return BoardOut.model_validate(save(db, board))


@router.patch("/{board_id}", response_model=BoardOut)
def update_board(
    board_id: int,
    body: BoardUpdate,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> BoardOut:
    board = get_or_404(db, Board, board_id, "Board")
    category_id = body.category_id or board.category_id
    if body.category_id is not None:
        _ensure_category(db, body.category_id)
    if body.title is not None or body.category_id is not None:
        _ensure_title_free(db, body.title or board.title, category_id, exclude_id=board_id)
    apply_update(board, body)
    stamp_modified(board, account.id)
    return BoardOut.model_validate(save(db, board))


@router.patch("/{board_id}/toggle", response_model=BoardOut)
def toggle_board(
    board_id: int,
    account: Annotated[CurrentAccount, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    activate: Annotated[bool | None, Query()] = None,
) -> BoardOut:
    board = get_or_404(db, Board, board_id, "Board")
    return BoardOut.model_validate(toggle_status(db, board, account.id, activate))
