"""Shared pieces of list responses."""

from datetime import datetime

from pydantic import BaseModel, Field


class PageMeta(BaseModel):
    """Pagination totals included in every list response."""

    total: int = Field(..., ge=0, description="Total matching rows")
    page_number: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)


class AuditFields(BaseModel):
    created_by_id: int | None = None
    created_at: datetime | None = None
    modified_by_id: int | None = None
    modified_at: datetime | None = None
