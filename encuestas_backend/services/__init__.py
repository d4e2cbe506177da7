"""Service layer for business logic."""
from encuestas_backend.services.auth_service import AuthService
from encuestas_backend.services.user_service import UserService
from encuestas_backend.services.project_service import ProjectService
from encuestas_backend.services.survey_service import SurveyService
from encuestas_backend.services.assignment_service import AssignmentService
from encuestas_backend.services.response_service import ResponseService
from encuestas_backend.services.results_service import ResultsService

__all__ = [
    "AuthService",
    "UserService",
    "ProjectService",
    "SurveyService",
    "AssignmentService",
    "ResponseService",
    "ResultsService",
]
