"""Wire schemas for the legacy identity service (field names are fixed by that service)."""

from pydantic import BaseModel, ConfigDict, Field


class LegacyAuthRequest(BaseModel):
    """Body posted to the legacy login endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    user: str = Field(..., alias="User")
    password: str = Field(..., alias="Passwd")
    app_id: int = Field(..., alias="IdAplicativo")
    signature: str = Field(..., alias="Firma")


class LegacyAuthMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    code: int = Field(..., alias="CodigoMensaje")
    description: str | None = Field(default=None, alias="DescMensaje")


class LegacyAuthRole(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    description: str | None = Field(default=None, alias="Descripcion")


class LegacyAuthResponse(BaseModel):
    """Legacy service verdict. CodigoMensaje == 0 means the credentials were accepted."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    message: LegacyAuthMessage = Field(..., alias="Mensaje")
    roles: list[LegacyAuthRole] | None = Field(default=None, alias="Roles")
