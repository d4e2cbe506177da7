"""Survey schemas."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from encuestas_backend.models.survey import QuestionType


class QuestionCreate(BaseModel):
    """Question with its options (options only apply to choice and scale types)."""
    pregunta: str = Field(min_length=1)
    tipo: QuestionType
    opciones: Optional[List[str]] = None

    @model_validator(mode="after")
    def check_options(self):
        if self.tipo.has_options and not self.opciones:
            raise ValueError(f"Las preguntas de tipo {self.tipo.value} requieren opciones")
        if self.opciones and any(not o.strip() for o in self.opciones):
            raise ValueError("Las opciones no pueden estar vacías")
        return self


class SurveyCreate(BaseModel):
    """Create survey with questions and options."""
    titulo: str = Field(min_length=1, max_length=255)
    proyecto_id: int = Field(gt=0, alias="proyectoId")
    administrador_id: int = Field(gt=0, alias="administradorId")
    preguntas: List[QuestionCreate] = Field(min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class SurveyCreated(BaseModel):
    message: str
    encuesta_id: int = Field(alias="encuestaId")

    model_config = ConfigDict(populate_by_name=True)


class SurveySummary(BaseModel):
    """Survey row with its project name for listings."""
    id: int
    titulo: str
    fecha: Optional[datetime] = None
    proyecto: Optional[str] = None


class OptionResponse(BaseModel):
    idopcion: int
    opcion: str


class QuestionResponse(BaseModel):
    """Question with options; options is empty for open questions."""
    idpregunta: int
    pregunta: str
    tipo: QuestionType
    opciones: List[OptionResponse] = Field(default_factory=list)
