"""Pydantic request/response schemas."""

from boardsctrl.schemas.auth import (
    CurrentAccount,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
)
from boardsctrl.schemas.boards import BoardCreate, BoardOut, BoardsListResponse, BoardUpdate
from boardsctrl.schemas.categories import (
    CategoriesListResponse,
    CategoryCreate,
    CategoryOut,
    CategoryUpdate,
)
from boardsctrl.schemas.common import AuditFields, PageMeta
from boardsctrl.schemas.health import HealthResponse
from boardsctrl.schemas.legacy_auth import LegacyAuthRequest, LegacyAuthResponse
from boardsctrl.schemas.roles import RoleCreate, RoleOut, RolesListResponse, RoleUpdate
from boardsctrl.schemas.slides import SlideCreate, SlideOut, SlidesListResponse, SlideUpdate
from boardsctrl.schemas.users import UserCreate, UserOut, UsersListResponse, UserUpdate

__all__ = [
    "AuditFields",
    "BoardCreate",
    "BoardOut",
    "BoardsListResponse",
    "BoardUpdate",
    "CategoriesListResponse",
    "CategoryCreate",
    "CategoryOut",
    "CategoryUpdate",
    "CurrentAccount",
    "HealthResponse",
    "LegacyAuthRequest",
    "LegacyAuthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PageMeta",
    "RegisterRequest",
    "RoleCreate",
    "RoleOut",
    "RolesListResponse",
    "RoleUpdate",
    "SlideCreate",
    "SlideOut",
    "SlidesListResponse",
    "SlideUpdate",
    "UserCreate",
    "UserOut",
    "UsersListResponse",
    "UserUpdate",
]
