"""Authentication service."""
from typing import Optional, Union

from sqlalchemy.orm import Session

from encuestas_backend.core.exceptions import AuthenticationError
from encuestas_backend.core.security import verify_password
from encuestas_backend.repositories.user_repository import UserRepository
from encuestas_backend.models.user import Administrator, Client
from encuestas_backend.schemas.user import UserResponse, LoginResponse


class AuthService:
    """Authentication business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)

    def authenticate_admin(self, usuario: str, password: str) -> Optional[Administrator]:
        admin = self.user_repo.get_admin_by_usuario(usuario)
        if admin and verify_password(password, admin.hashed_password):
            return admin
        return None

    def authenticate_client(self, usuario: str, password: str) -> Optional[Client]:
        client = self.user_repo.get_client_by_usuario(usuario)
        if client and verify_password(password, client.hashed_password):
            return client
        return None

    def authenticate(self, usuario: str, password: str) -> Optional[Union[Administrator, Client]]:
        """
        Look up the credentials, administrators first.

        Returns:
            The first matching administrator or client, None otherwise
        """
        return self.authenticate_admin(usuario, password) or self.authenticate_client(usuario, password)

    def login(self, usuario: str, password: str) -> LoginResponse:
        """
        Verify credentials. No session or token is issued.

        Raises:
            AuthenticationError: If neither table matches
        """
        user = self.authenticate(usuario, password)

        if isinstance(user, Administrator):
            return LoginResponse(
                message="Login exitoso",
                user=UserResponse.model_validate(user),
                tipo="administrador",
            )
        if isinstance(user, Client):
            return LoginResponse(
                message="Login exitoso",
                user=UserResponse.model_validate(user),
                tipo="cliente",
            )

        raise AuthenticationError()
