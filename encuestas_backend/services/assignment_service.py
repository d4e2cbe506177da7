"""
Assignment resolution.

A client is assigned every survey owned by a project it belongs to. Of
those, a survey is completed when a response header exists for the
(client, survey) pair and pending otherwise.
"""
from typing import List, NamedTuple

from sqlalchemy.orm import Session

from encuestas_backend.repositories.project_repository import ProjectRepository
from encuestas_backend.repositories.survey_repository import SurveyRepository
from encuestas_backend.repositories.response_repository import ResponseRepository
from encuestas_backend.schemas.survey import SurveySummary
from encuestas_backend.services.survey_service import to_summary


class ClientAssignments(NamedTuple):
    pending: List[SurveySummary]
    completed: List[SurveySummary]


def _unique_by_id(surveys: List[SurveySummary]) -> List[SurveySummary]:
    seen = set()
    unique = []
    for survey in surveys:
        if survey.id in seen:
            continue
        seen.add(survey.id)
        unique.append(survey)
    return unique


class AssignmentService:
    """Pending and completed surveys per client."""

    def __init__(self, db: Session):
        self.db = db
        self.project_repo = ProjectRepository(db)
        self.survey_repo = SurveyRepository(db)
        self.response_repo = ResponseRepository(db)

    def resolve(self, client_id: int) -> ClientAssignments:
        """
        Partition the client's assigned surveys.

        A client without project memberships gets two empty lists. An
        unknown client id behaves the same way.
        """
        project_ids = self.project_repo.get_project_ids_for_client(client_id)
        if not project_ids:
            return ClientAssignments(pending=[], completed=[])

        assigned = [
            to_summary(survey, nombre)
            for survey, nombre in self.survey_repo.get_by_projects_with_project(project_ids)
        ]
        responded = self.response_repo.get_responded_survey_ids(client_id)

        pending = [s for s in assigned if s.id not in responded]
        completed = [s for s in assigned if s.id in responded]

        return ClientAssignments(
            pending=_unique_by_id(pending),
            completed=_unique_by_id(completed),
        )

    def pending_surveys_for_client(self, client_id: int) -> List[SurveySummary]:
        return self.resolve(client_id).pending

    def completed_surveys_for_client(self, client_id: int) -> List[SurveySummary]:
        return self.resolve(client_id).completed
