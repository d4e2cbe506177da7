"""Repository layer for data access."""
from encuestas_backend.repositories.user_repository import UserRepository
from encuestas_backend.repositories.project_repository import ProjectRepository
from encuestas_backend.repositories.survey_repository import SurveyRepository
from encuestas_backend.repositories.response_repository import ResponseRepository

__all__ = [
    "UserRepository",
    "ProjectRepository",
    "SurveyRepository",
    "ResponseRepository",
]
