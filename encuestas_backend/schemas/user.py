"""User schemas."""
from typing import Optional, Literal

from pydantic import BaseModel, ConfigDict, Field


class AdminCreate(BaseModel):
    """Register administrator."""
    usuario: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, alias="contraseña")

    model_config = ConfigDict(populate_by_name=True)


class ClientCreate(BaseModel):
    """Register client, optionally assigning a project."""
    nombre: str = Field(min_length=1, max_length=100)
    apellido: str = Field(min_length=1, max_length=100)
    usuario: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, alias="contraseña")
    rol: Optional[str] = None
    proyecto_id: Optional[int] = Field(None, gt=0, alias="proyectoId")

    model_config = ConfigDict(populate_by_name=True)


class UserLogin(BaseModel):
    """Login credentials."""
    usuario: str = Field(min_length=1)
    password: str = Field(min_length=1, alias="contraseña")

    model_config = ConfigDict(populate_by_name=True)


class CreatedResponse(BaseModel):
    """Generic creation acknowledgement."""
    message: str
    id: int


class UserResponse(BaseModel):
    """Administrator or client without credentials; client-only fields are null for administrators."""
    id: int
    usuario: str
    nombre: Optional[str] = None
    apellido: Optional[str] = None
    rol: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    """Successful login."""
    message: str
    user: UserResponse
    tipo: Literal["administrador", "cliente"]
