"""Project service."""
import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from encuestas_backend.core.exceptions import ConflictError, NotFoundError
from encuestas_backend.repositories.project_repository import ProjectRepository
from encuestas_backend.repositories.user_repository import UserRepository
from encuestas_backend.models.project import Project, ProjectMembership
from encuestas_backend.schemas.project import ProjectCreate

logger = logging.getLogger(__name__)


class ProjectService:
    """Project business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.project_repo = ProjectRepository(db)
        self.user_repo = UserRepository(db)

    def get_projects(self) -> List[Project]:
        return self.project_repo.get_all()

    def create_project(self, project_data: ProjectCreate) -> Project:
        """
        Create a project.

        Raises:
            ConflictError: If a project with the same name exists (case-insensitive)
        """
        nombre = project_data.nombre.strip()
        if self.project_repo.exists_by_name(nombre):
            raise ConflictError("El proyecto ya existe")

        try:
            project = self.project_repo.create(nombre)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("El proyecto ya existe")

        logger.info(f"Project created: id={project.id}")
        return project

    def add_client(self, project_id: int, client_id: int) -> ProjectMembership:
        """
        Add a client to a project. Adding an existing member is a no-op.

        Raises:
            NotFoundError: If the project or the client does not exist
        """
        if self.project_repo.get_by_id(project_id) is None:
            raise NotFoundError("Proyecto no encontrado")
        if self.user_repo.get_client_by_id(client_id) is None:
            raise NotFoundError("Cliente no encontrado")

        existing = self.project_repo.get_membership(project_id, client_id)
        if existing:
            return existing

        membership = self.project_repo.add_membership(project_id, client_id)
        self.db.commit()
        return membership
