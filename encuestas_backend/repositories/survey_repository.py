"""Survey, question and option data access."""
from typing import Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session, selectinload

from encuestas_backend.models.project import Project
from encuestas_backend.models.survey import Survey, Question, QuestionType, AnswerOption


class SurveyRepository:
    """Queries over encuesta, pregunta and opcion."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, survey_id: int) -> Optional[Survey]:
        return self.db.get(Survey, survey_id)

    def exists(self, survey_id: int) -> bool:
        return self.db.query(Survey.id).filter(Survey.id == survey_id).first() is not None

    def get_all_with_project(self) -> List[Tuple[Survey, Optional[str]]]:
        """All surveys, newest first, with the project name (None if unresolved)."""
        return (
            self.db.query(Survey, Project.nombre)
            .outerjoin(Project, Survey.project_id == Project.id)
            .order_by(Survey.fecha.desc(), Survey.id.desc())
            .all()
        )

    def get_by_projects_with_project(self, project_ids: Iterable[int]) -> List[Tuple[Survey, Optional[str]]]:
        """Surveys owned by any of the given projects, with the project name."""
        project_ids = list(project_ids)
        if not project_ids:
            return []
        return (
            self.db.query(Survey, Project.nombre)
            .outerjoin(Project, Survey.project_id == Project.id)
            .filter(Survey.project_id.in_(project_ids))
            .order_by(Survey.fecha.desc(), Survey.id.desc())
            .all()
        )

    def get_questions(self, survey_id: int, tipo: Optional[QuestionType] = None) -> List[Question]:
        """Questions of a survey with their options eagerly loaded."""
        query = (
            self.db.query(Question)
            .options(selectinload(Question.options))
            .filter(Question.survey_id == survey_id)
        )
        if tipo is not None:
            query = query.filter(Question.tipo == tipo)
        return query.order_by(Question.id).all()

    def create(self, titulo: str, project_id: int, admin_id: int) -> Survey:
        survey = Survey(titulo=titulo, project_id=project_id, admin_id=admin_id)
        self.db.add(survey)
        self.db.flush()
        return survey

    def create_question(self, survey_id: int, pregunta: str, tipo: QuestionType) -> Question:
        question = Question(survey_id=survey_id, pregunta=pregunta, tipo=tipo)
        self.db.add(question)
        self.db.flush()
        return question

    def create_answer_option(self, question_id: int, opcion: str) -> AnswerOption:
        option = AnswerOption(question_id=question_id, opcion=opcion)
        self.db.add(option)
        self.db.flush()
        return option
