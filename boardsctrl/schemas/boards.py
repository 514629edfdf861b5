"""Schemas for board endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from boardsctrl.schemas.common import AuditFields, PageMeta


class BoardCreate(BaseModel):
    category_id: int = Field(..., ge=1)
    title: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=255)
    status: bool = True


class BoardUpdate(BaseModel):
    category_id: int | None = Field(default=None, ge=1)
    title: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=255)
    status: bool | None = None


class BoardOut(AuditFields):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category_id: int
    title: str
    description: str | None = None
    status: bool


class BoardsListResponse(PageMeta):
    boards: list[BoardOut]
