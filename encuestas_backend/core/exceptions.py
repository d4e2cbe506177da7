"""
Error taxonomy.

Every error is an ``HTTPException`` so services can raise it directly and
FastAPI renders it without a per-route try/except. Storage failures that
escape a service are mapped by the handler registered in ``main``.
"""
from typing import Optional

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Missing or malformed input: request bodies that fail validation, or service checks."""

    def __init__(self, detail: str = "Datos inválidos"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundError(HTTPException):
    """Referenced entity does not exist."""

    def __init__(self, detail: str = "Recurso no encontrado"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictError(HTTPException):
    """Duplicate login name, project name or survey response."""

    def __init__(self, detail: str = "El recurso ya existe"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class AuthenticationError(HTTPException):
    """Credentials did not match any administrator or client."""

    def __init__(self, detail: str = "Credenciales inválidas"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class StorageError(HTTPException):
    """Backend call failed; the backend message is passed through."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail or "Error de almacenamiento",
        )
