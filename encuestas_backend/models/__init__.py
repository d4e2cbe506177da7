"""Database models."""
from encuestas_backend.models.user import Administrator, Client
from encuestas_backend.models.project import Project, ProjectMembership
from encuestas_backend.models.survey import Survey, Question, QuestionType, AnswerOption
from encuestas_backend.models.response import SurveyResponse, ResponseDetail

__all__ = [
    "Administrator",
    "Client",
    "Project",
    "ProjectMembership",
    "Survey",
    "Question",
    "QuestionType",
    "AnswerOption",
    "SurveyResponse",
    "ResponseDetail",
]
