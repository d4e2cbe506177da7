"""Project router."""
from typing import List

from fastapi import APIRouter

from encuestas_backend.services.project_service import ProjectService
from encuestas_backend.schemas.project import (
    ProjectCreate, ProjectResponse, MembershipCreate, MembershipResponse
)
from encuestas_backend.schemas.user import CreatedResponse
from encuestas_backend.api.dependencies import DbSession, ProjectId

router = APIRouter(prefix="/proyectos", tags=["Projects"])


@router.get("", response_model=List[ProjectResponse])
def list_projects(db: DbSession):
    """
    List all projects.
    """
    return ProjectService(db).get_projects()


@router.post("", response_model=CreatedResponse, status_code=201)
def create_project(project_data: ProjectCreate, db: DbSession):
    """
    Create a project. Names are unique ignoring case.
    """
    project = ProjectService(db).create_project(project_data)
    return CreatedResponse(message="Proyecto creado exitosamente", id=project.id)


@router.post("/{idproyecto}/clientes", response_model=MembershipResponse, status_code=201)
def add_client_to_project(idproyecto: ProjectId, membership_data: MembershipCreate, db: DbSession):
    """
    Add an existing client to a project.
    """
    membership = ProjectService(db).add_client(idproyecto, membership_data.cliente_id)
    return MembershipResponse(idproyecto=membership.project_id, idcliente=membership.client_id)
