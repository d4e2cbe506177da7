"""User registration router."""
from fastapi import APIRouter

from encuestas_backend.services.user_service import UserService
from encuestas_backend.schemas.user import AdminCreate, ClientCreate, CreatedResponse
from encuestas_backend.api.dependencies import DbSession

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/admin", response_model=CreatedResponse, status_code=201)
def register_admin(admin_data: AdminCreate, db: DbSession):
    """
    Register an administrator.
    """
    service = UserService(db)
    admin = service.register_administrator(admin_data)
    return CreatedResponse(message="Administrador registrado exitosamente", id=admin.id)


@router.post("/cliente", response_model=CreatedResponse, status_code=201)
def register_client(client_data: ClientCreate, db: DbSession):
    """
    Register a client.

    If proyectoId is given the client is added to that project; a failure
    there does not undo the registration.
    """
    service = UserService(db)
    client = service.register_client(client_data)
    return CreatedResponse(message="Cliente registrado exitosamente", id=client.id)
