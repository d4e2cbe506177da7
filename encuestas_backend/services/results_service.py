"""
Survey results aggregation.

Multiple-choice questions are tallied per option with percentages over
the question total; open questions return their raw answers. The
survey-wide total only adds up multiple-choice answers.

A failed sub-query degrades to zero (option count) or an empty list
(open question answers) instead of failing the whole report.
"""
import logging
from typing import List, NamedTuple, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from encuestas_backend.core.exceptions import NotFoundError
from encuestas_backend.repositories.response_repository import ResponseRepository
from encuestas_backend.repositories.survey_repository import SurveyRepository
from encuestas_backend.models.survey import Question, QuestionType
from encuestas_backend.schemas.report import (
    OptionTally, MultipleChoiceResult, OpenQuestionResult, SurveyReport
)

logger = logging.getLogger(__name__)


def percentage(count: int, total: int) -> float:
    """Share of total as 0-100; 0 when there is nothing to divide."""
    if total <= 0:
        return 0.0
    return count / total * 100


class QuestionData(NamedTuple):
    """Plain copy of a question and its options, detached from the session."""
    id: int
    pregunta: str
    tipo: QuestionType
    opciones: List[Tuple[int, str]]


def question_data(question: Question) -> QuestionData:
    return QuestionData(
        id=question.id,
        pregunta=question.pregunta,
        tipo=question.tipo,
        opciones=[(option.id, option.opcion) for option in question.options],
    )


class ResultsService:
    """Builds the results report of a survey."""

    def __init__(self, db: Session):
        self.db = db
        self.survey_repo = SurveyRepository(db)
        self.response_repo = ResponseRepository(db)

    def _count_option(self, option_id: int) -> int:
        try:
            return self.response_repo.count_by_option(option_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning(f"Count failed for option {option_id}, using 0: {e}")
            return 0

    def _texts_for_question(self, question_id: int) -> List[str]:
        try:
            return self.response_repo.get_texts_for_question(question_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning(f"Answer fetch failed for question {question_id}, using []: {e}")
            return []

    def tally_question(self, question: QuestionData) -> MultipleChoiceResult:
        counts = [
            (option_id, opcion, self._count_option(option_id))
            for option_id, opcion in question.opciones
        ]
        total = sum(count for _, _, count in counts)

        return MultipleChoiceResult(
            idpregunta=question.id,
            pregunta=question.pregunta,
            tipo=question.tipo,
            total_respuestas=total,
            opciones=[
                OptionTally(
                    idopcion=option_id,
                    opcion=opcion,
                    cantidad=count,
                    porcentaje=percentage(count, total),
                )
                for option_id, opcion, count in counts
            ],
        )

    def collect_open_answers(self, question: QuestionData) -> OpenQuestionResult:
        return OpenQuestionResult(
            idpregunta=question.id,
            pregunta=question.pregunta,
            respuestas=self._texts_for_question(question.id),
        )

    def aggregate_results(self, survey_id: int) -> SurveyReport:
        """
        Build the report for a survey.

        Questions are copied out of the session before any count runs: a
        degraded sub-query rolls back and expires every loaded instance.

        Raises:
            NotFoundError: If the survey does not exist
        """
        if not self.survey_repo.exists(survey_id):
            raise NotFoundError("Encuesta no encontrada")

        choice_questions = [
            question_data(q)
            for q in self.survey_repo.get_questions(survey_id, QuestionType.OPCION_MULTIPLE)
        ]
        open_questions = [
            question_data(q)
            for q in self.survey_repo.get_questions(survey_id, QuestionType.ABIERTA)
        ]

        multiple_choice = [self.tally_question(q) for q in choice_questions]
        open_results = [self.collect_open_answers(q) for q in open_questions]

        return SurveyReport(
            total_respuestas=sum(q.total_respuestas for q in multiple_choice),
            preguntas_opcion_multiple=multiple_choice,
            preguntas_abiertas=open_results,
        )
