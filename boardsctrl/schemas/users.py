"""Schemas for user administration endpoints (passwords are never returned)."""

from pydantic import BaseModel, ConfigDict, Field

from boardsctrl.schemas.common import AuditFields, PageMeta


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: str = Field(default="", max_length=255)
    role_id: int = Field(..., ge=1)
    password: str | None = Field(
        default=None,
        min_length=1,
        max_length=128,
        description="Optional local password; omit for accounts verified only by the legacy service",
    )


class UserUpdate(BaseModel):
    username: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = Field(default=None, max_length=255)
    role_id: int | None = Field(default=None, ge=1)
    status: bool | None = None


class UserOut(AuditFields):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role_id: int
    status: bool


class UsersListResponse(PageMeta):
    users: list[UserOut]
