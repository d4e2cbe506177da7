"""Pydantic schemas for API validation and serialization."""
from encuestas_backend.schemas.user import (
    AdminCreate, ClientCreate, UserLogin, CreatedResponse,
    UserResponse, LoginResponse
)
from encuestas_backend.schemas.project import (
    ProjectCreate, ProjectResponse, MembershipCreate, MembershipResponse
)
from encuestas_backend.schemas.survey import (
    SurveyCreate, SurveyCreated, SurveySummary,
    QuestionCreate, QuestionResponse, OptionResponse
)
from encuestas_backend.schemas.response import (
    AnswerInput, SurveyResponseCreate, SurveyResponseRecorded,
    AnswerDetail, ClientAnswers
)
from encuestas_backend.schemas.report import (
    OptionTally, MultipleChoiceResult, OpenQuestionResult, SurveyReport
)

__all__ = [
    "AdminCreate",
    "ClientCreate",
    "UserLogin",
    "CreatedResponse",
    "UserResponse",
    "LoginResponse",
    "ProjectCreate",
    "ProjectResponse",
    "MembershipCreate",
    "MembershipResponse",
    "SurveyCreate",
    "SurveyCreated",
    "SurveySummary",
    "QuestionCreate",
    "QuestionResponse",
    "OptionResponse",
    "AnswerInput",
    "SurveyResponseCreate",
    "SurveyResponseRecorded",
    "AnswerDetail",
    "ClientAnswers",
    "OptionTally",
    "MultipleChoiceResult",
    "OpenQuestionResult",
    "SurveyReport",
]
