"""User service."""
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from encuestas_backend.core.exceptions import ConflictError
from encuestas_backend.core.security import get_password_hash
from encuestas_backend.repositories.user_repository import UserRepository
from encuestas_backend.repositories.project_repository import ProjectRepository
from encuestas_backend.models.user import Administrator, Client
from encuestas_backend.schemas.user import AdminCreate, ClientCreate

logger = logging.getLogger(__name__)

DEFAULT_CLIENT_ROLE = "cliente"


class UserService:
    """Registration of administrators and clients."""

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)
        self.project_repo = ProjectRepository(db)

    def register_administrator(self, admin_data: AdminCreate) -> Administrator:
        """
        Create a new administrator.

        Raises:
            ConflictError: If the login name is already taken
        """
        if self.user_repo.admin_exists_by_usuario(admin_data.usuario):
            raise ConflictError("El usuario ya existe")

        try:
            admin = self.user_repo.create_admin(
                usuario=admin_data.usuario,
                hashed_password=get_password_hash(admin_data.password),
            )
            self.db.commit()
        except IntegrityError:
            # Lost the race against a concurrent registration
            self.db.rollback()
            raise ConflictError("El usuario ya existe")

        logger.info(f"Administrator registered: id={admin.id}")
        return admin

    def register_client(self, client_data: ClientCreate) -> Client:
        """
        Create a new client and optionally add it to a project.

        The membership is written after the client is committed; a failure
        there is logged and the client is kept.

        Raises:
            ConflictError: If the login name is already taken
        """
        if self.user_repo.client_exists_by_usuario(client_data.usuario):
            raise ConflictError("El usuario ya existe")

        try:
            client = self.user_repo.create_client(
                nombre=client_data.nombre,
                apellido=client_data.apellido,
                usuario=client_data.usuario,
                hashed_password=get_password_hash(client_data.password),
                rol=client_data.rol or DEFAULT_CLIENT_ROLE,
            )
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("El usuario ya existe")

        logger.info(f"Client registered: id={client.id}")

        if client_data.proyecto_id:
            self._assign_project(client, client_data.proyecto_id)

        return client

    def _assign_project(self, client: Client, project_id: int) -> None:
        client_id = client.id
        try:
            if self.project_repo.get_by_id(project_id) is None:
                logger.warning(f"Project {project_id} not found, client {client_id} left without project")
                return
            self.project_repo.add_membership(project_id=project_id, client_id=client_id)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error assigning project {project_id} to client {client_id}: {e}")
