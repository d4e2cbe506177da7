"""Survey service."""
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from encuestas_backend.core.exceptions import NotFoundError
from encuestas_backend.repositories.survey_repository import SurveyRepository
from encuestas_backend.repositories.project_repository import ProjectRepository
from encuestas_backend.repositories.user_repository import UserRepository
from encuestas_backend.models.survey import Survey, Question
from encuestas_backend.schemas.survey import (
    SurveyCreate, SurveySummary, QuestionResponse, OptionResponse
)

logger = logging.getLogger(__name__)


def to_summary(survey: Survey, project_name: Optional[str]) -> SurveySummary:
    """Listing shape shared by the catalog and the assignment views."""
    return SurveySummary(
        id=survey.id,
        titulo=survey.titulo,
        fecha=survey.fecha,
        proyecto=project_name,
    )


def to_question_response(question: Question) -> QuestionResponse:
    options = question.options if question.tipo.has_options else []
    return QuestionResponse(
        idpregunta=question.id,
        pregunta=question.pregunta,
        tipo=question.tipo,
        opciones=[OptionResponse(idopcion=o.id, opcion=o.opcion) for o in options],
    )


class SurveyService:
    """Survey business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.survey_repo = SurveyRepository(db)
        self.project_repo = ProjectRepository(db)
        self.user_repo = UserRepository(db)

    def create_survey(self, survey_data: SurveyCreate) -> Survey:
        """
        Create a survey with all its questions and options.

        Everything is written in one transaction; any failure leaves
        nothing behind.

        Raises:
            NotFoundError: If the project or administrator does not exist
        """
        if self.project_repo.get_by_id(survey_data.proyecto_id) is None:
            raise NotFoundError("Proyecto no encontrado")
        if self.user_repo.get_admin_by_id(survey_data.administrador_id) is None:
            raise NotFoundError("Administrador no encontrado")

        try:
            survey = self.survey_repo.create(
                titulo=survey_data.titulo,
                project_id=survey_data.proyecto_id,
                admin_id=survey_data.administrador_id,
            )

            for question_data in survey_data.preguntas:
                question = self.survey_repo.create_question(
                    survey_id=survey.id,
                    pregunta=question_data.pregunta,
                    tipo=question_data.tipo,
                )

                # Open questions never own options
                if question_data.tipo.has_options:
                    for option_text in question_data.opciones:
                        self.survey_repo.create_answer_option(
                            question_id=question.id,
                            opcion=option_text,
                        )

            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        logger.info(f"Survey created: id={survey.id}, preguntas={len(survey_data.preguntas)}")
        return survey

    def get_surveys(self) -> List[SurveySummary]:
        """All surveys with their project name."""
        return [to_summary(survey, nombre) for survey, nombre in self.survey_repo.get_all_with_project()]

    def get_questions(self, survey_id: int) -> List[QuestionResponse]:
        """
        Questions of a survey with options for choice and scale types.

        Raises:
            NotFoundError: If the survey does not exist
        """
        if not self.survey_repo.exists(survey_id):
            raise NotFoundError("Encuesta no encontrada")

        return [to_question_response(q) for q in self.survey_repo.get_questions(survey_id)]
