"""Schemas for slide endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from boardsctrl.schemas.common import AuditFields, PageMeta

# Display time bounds in seconds.
SLIDE_TIME_MIN = 1
SLIDE_TIME_MAX = 1000


class SlideCreate(BaseModel):
    board_id: int = Field(..., ge=1)
    title: str = Field(..., min_length=1, max_length=100)
    url: str = Field(..., min_length=1, max_length=255)
    time: int = Field(default=10, ge=SLIDE_TIME_MIN, le=SLIDE_TIME_MAX)
    status: bool = True


class SlideUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=100)
    url: str | None = Field(default=None, min_length=1, max_length=255)
    time: int | None = Field(default=None, ge=SLIDE_TIME_MIN, le=SLIDE_TIME_MAX)
    status: bool | None = None


class SlideOut(AuditFields):
    model_config = ConfigDict(from_attributes=True)

    id: int
    board_id: int
    title: str
    url: str
    time: int
    status: bool


class SlidesListResponse(PageMeta):
    slides: list[SlideOut]
