"""Project and membership data access."""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from encuestas_backend.models.project import Project, ProjectMembership


class ProjectRepository:
    """Queries over proyecto and proyecto_cliente."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, project_id: int) -> Optional[Project]:
        return self.db.get(Project, project_id)

    def exists_by_name(self, nombre: str) -> bool:
        """Case-insensitive name lookup."""
        return self.db.query(Project.id).filter(
            func.lower(Project.nombre) == nombre.lower()
        ).first() is not None

    def get_all(self) -> List[Project]:
        return self.db.query(Project).order_by(Project.id).all()

    def create(self, nombre: str) -> Project:
        project = Project(nombre=nombre)
        self.db.add(project)
        self.db.flush()
        return project

    def get_membership(self, project_id: int, client_id: int) -> Optional[ProjectMembership]:
        return self.db.get(ProjectMembership, (project_id, client_id))

    def add_membership(self, project_id: int, client_id: int) -> ProjectMembership:
        membership = ProjectMembership(project_id=project_id, client_id=client_id)
        self.db.add(membership)
        self.db.flush()
        return membership

    def get_project_ids_for_client(self, client_id: int) -> List[int]:
        rows = self.db.query(ProjectMembership.project_id).filter(
            ProjectMembership.client_id == client_id
        ).all()
        return [project_id for (project_id,) in rows]
