"""Project schemas."""
from pydantic import BaseModel, ConfigDict, Field


class ProjectCreate(BaseModel):
    nombre: str = Field(min_length=1, max_length=200)


class ProjectResponse(BaseModel):
    id: int
    nombre: str

    model_config = ConfigDict(from_attributes=True)


class MembershipCreate(BaseModel):
    """Assign an existing client to a project."""
    cliente_id: int = Field(gt=0, alias="idCliente")

    model_config = ConfigDict(populate_by_name=True)


class MembershipResponse(BaseModel):
    idproyecto: int
    idcliente: int
