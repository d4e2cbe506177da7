"""Survey response schemas."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from encuestas_backend.models.survey import QuestionType


class AnswerInput(BaseModel):
    """One answer: free text or a selected option, never both."""
    pregunta_id: int = Field(gt=0, alias="idPregunta")
    contenido_texto: Optional[str] = None
    opcion_id: Optional[int] = Field(None, gt=0, alias="idOpcion")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def exactly_one_value(self):
        if (self.contenido_texto is None) == (self.opcion_id is None):
            raise ValueError("Cada respuesta debe tener contenido_texto o idOpcion, pero no ambos")
        return self


class SurveyResponseCreate(BaseModel):
    """Submit answers of one client for one survey."""
    encuesta_id: int = Field(gt=0, alias="idEncuesta")
    cliente_id: int = Field(gt=0, alias="idCliente")
    respuestas: List[AnswerInput] = Field(min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class SurveyResponseRecorded(BaseModel):
    message: str
    respuesta_id: int = Field(alias="idRespuesta")

    model_config = ConfigDict(populate_by_name=True)


class AnswerDetail(BaseModel):
    """Submitted answer joined with its question and chosen option."""
    idpregunta: int
    pregunta: Optional[str] = None
    tipo: Optional[QuestionType] = None
    contenido_texto: Optional[str] = None
    idopcion: Optional[int] = None
    opcion: Optional[str] = None


class ClientAnswers(BaseModel):
    """One client's submission for one survey."""
    idrespuesta: int
    idencuesta: int
    idcliente: int
    fecha: datetime
    respuestas: List[AnswerDetail]
