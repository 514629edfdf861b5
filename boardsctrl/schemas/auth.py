"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=100, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class LoginResponse(BaseModel):
    """JWT issued after a successful login, plus the identity it encodes."""

    token: str = Field(..., description="JWT; send it as the Authorization header")
    username: str
    role: str
    account_id: int = Field(..., serialization_alias="accountId")
    message: str = Field(default="Inicio de sesión exitoso.")


class RegisterRequest(BaseModel):
    """New account. `role` is a role id or a role name (e.g. 'Admin')."""

    username: str = Field(..., min_length=1, max_length=100, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")
    email: str = Field(default="", max_length=255, description="Email address")
    role: int | str = Field(..., description="Role id or role name")


class MessageResponse(BaseModel):
    message: str


class CurrentAccount(BaseModel):
    """Identity taken from a verified token (no database lookup)."""

    id: int
    username: str
    role: str
