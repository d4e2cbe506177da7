"""Administrator and client data access."""
from typing import Optional

from sqlalchemy.orm import Session

from encuestas_backend.models.user import Administrator, Client


class UserRepository:
    """Queries over the administrador and cliente tables."""

    def __init__(self, db: Session):
        self.db = db

    # Administrators

    def get_admin_by_id(self, admin_id: int) -> Optional[Administrator]:
        return self.db.get(Administrator, admin_id)

    def get_admin_by_usuario(self, usuario: str) -> Optional[Administrator]:
        return self.db.query(Administrator).filter(Administrator.usuario == usuario).first()

    def admin_exists_by_usuario(self, usuario: str) -> bool:
        return self.db.query(Administrator.id).filter(Administrator.usuario == usuario).first() is not None

    def create_admin(self, usuario: str, hashed_password: str) -> Administrator:
        admin = Administrator(usuario=usuario, hashed_password=hashed_password)
        self.db.add(admin)
        self.db.flush()
        return admin

    # Clients

    def get_client_by_id(self, client_id: int) -> Optional[Client]:
        return self.db.get(Client, client_id)

    def get_client_by_usuario(self, usuario: str) -> Optional[Client]:
        return self.db.query(Client).filter(Client.usuario == usuario).first()

    def client_exists_by_usuario(self, usuario: str) -> bool:
        return self.db.query(Client.id).filter(Client.usuario == usuario).first() is not None

    def create_client(self, nombre: str, apellido: str, usuario: str,
                      hashed_password: str, rol: str) -> Client:
        client = Client(
            nombre=nombre,
            apellido=apellido,
            usuario=usuario,
            hashed_password=hashed_password,
            rol=rol,
        )
        self.db.add(client)
        self.db.flush()
        return client
