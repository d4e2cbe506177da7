"""Authentication router."""
from fastapi import APIRouter

from encuestas_backend.services.auth_service import AuthService
from encuestas_backend.schemas.user import UserLogin, LoginResponse
from encuestas_backend.api.dependencies import DbSession

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
def login(credentials: UserLogin, db: DbSession):
    """
    Login with usuario and contraseña.

    Administrators are checked before clients. Nothing is kept between
    calls; every request must send its credentials again.
    """
    auth_service = AuthService(db)
    return auth_service.login(credentials.usuario, credentials.password)
