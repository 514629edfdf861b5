"""Schemas for role endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from boardsctrl.schemas.common import AuditFields, PageMeta


class RoleCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class RoleUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    status: bool | None = None


class RoleOut(AuditFields):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    status: bool


class RolesListResponse(PageMeta):
    roles: list[RoleOut]
