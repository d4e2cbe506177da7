"""Survey results report schemas."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from encuestas_backend.models.survey import QuestionType


class OptionTally(BaseModel):
    idopcion: int
    opcion: str
    cantidad: int
    porcentaje: float


class MultipleChoiceResult(BaseModel):
    idpregunta: int
    pregunta: str
    tipo: QuestionType
    total_respuestas: int
    opciones: List[OptionTally]


class OpenQuestionResult(BaseModel):
    idpregunta: int
    pregunta: str
    respuestas: List[str]


class SurveyReport(BaseModel):
    """
    Aggregated results for one survey.

    total_respuestas only counts multiple-choice answers; open answers are
    listed but never counted.
    """
    total_respuestas: int = Field(alias="totalRespuestas")
    preguntas_opcion_multiple: List[MultipleChoiceResult] = Field(alias="preguntasOpcionMultiple")
    preguntas_abiertas: List[OpenQuestionResult] = Field(alias="preguntasAbiertas")

    model_config = ConfigDict(populate_by_name=True)
