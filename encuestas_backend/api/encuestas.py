"""Survey routers: authoring, assignment views, answering and results."""
from typing import List

from fastapi import APIRouter

from encuestas_backend.services.survey_service import SurveyService
from encuestas_backend.services.assignment_service import AssignmentService
from encuestas_backend.services.response_service import ResponseService
from encuestas_backend.services.results_service import ResultsService
from encuestas_backend.schemas.survey import (
    SurveyCreate, SurveyCreated, SurveySummary, QuestionResponse
)
from encuestas_backend.schemas.response import (
    SurveyResponseCreate, SurveyResponseRecorded, ClientAnswers
)
from encuestas_backend.schemas.report import SurveyReport
from encuestas_backend.api.dependencies import DbSession, SurveyId, ClientId

router = APIRouter(prefix="/encuestas", tags=["Surveys"])

# Singular prefix used by the answering client
encuesta_router = APIRouter(prefix="/encuesta", tags=["Surveys"])


@router.post("", response_model=SurveyCreated)
def create_survey(survey_data: SurveyCreate, db: DbSession):
    """
    Create a survey with its questions and options.

    The whole survey is stored atomically.
    """
    survey = SurveyService(db).create_survey(survey_data)
    return SurveyCreated(message="Encuesta creada exitosamente", encuesta_id=survey.id)


@router.get("", response_model=List[SurveySummary])
def list_surveys(db: DbSession):
    """
    List surveys with their project name.
    """
    return SurveyService(db).get_surveys()


@router.get("/all", response_model=List[SurveySummary])
def list_all_surveys(db: DbSession):
    """
    List surveys with their project name.
    """
    return SurveyService(db).get_surveys()


@router.get("/cliente/{idCliente}", response_model=List[SurveySummary])
def get_pending_surveys(idCliente: ClientId, db: DbSession):
    """
    Surveys of the client's projects not yet answered by the client.
    """
    return AssignmentService(db).pending_surveys_for_client(idCliente)


@router.get("/cliente/{idCliente}/respondidas", response_model=List[SurveySummary])
def get_completed_surveys(idCliente: ClientId, db: DbSession):
    """
    Surveys of the client's projects already answered by the client.
    """
    return AssignmentService(db).completed_surveys_for_client(idCliente)


@router.get("/respuestas/{idEncuesta}/{idCliente}", response_model=ClientAnswers)
def get_client_answers(idEncuesta: SurveyId, idCliente: ClientId, db: DbSession):
    """
    Answers submitted by one client for one survey.
    """
    return ResponseService(db).get_client_answers(idEncuesta, idCliente)


@router.get("/{idencuesta}/preguntas", response_model=List[QuestionResponse])
def get_questions(idencuesta: SurveyId, db: DbSession):
    """
    Questions of a survey; choice and scale questions include their options.
    """
    return SurveyService(db).get_questions(idencuesta)


@router.get("/{idencuesta}/resultados", response_model=SurveyReport)
def get_results(idencuesta: SurveyId, db: DbSession):
    """
    Aggregated results of a survey.

    totalRespuestas adds up multiple-choice answers only.
    """
    return ResultsService(db).aggregate_results(idencuesta)


@encuesta_router.get("/preguntas/{idEncuesta}", response_model=List[QuestionResponse])
def get_questions_for_answering(idEncuesta: SurveyId, db: DbSession):
    """
    Questions of a survey, as fetched by the answering screen.
    """
    return SurveyService(db).get_questions(idEncuesta)


@encuesta_router.post("/responder", response_model=SurveyResponseRecorded)
def submit_response(response_data: SurveyResponseCreate, db: DbSession):
    """
    Submit a client's answers for a survey.

    Each answer carries idPregunta and either contenido_texto or idOpcion.
    A client can answer a survey only once.
    """
    response = ResponseService(db).record_response(response_data)
    return SurveyResponseRecorded(message="Respuestas guardadas exitosamente", respuesta_id=response.id)
