"""Schemas for category endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from boardsctrl.schemas.common import AuditFields, PageMeta


class CategoryCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    status: bool = True


class CategoryUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=100)
    status: bool | None = None


class CategoryOut(AuditFields):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    status: bool


class CategoriesListResponse(PageMeta):
    categories: list[CategoryOut]
