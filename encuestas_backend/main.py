"""FastAPI application."""
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from encuestas_backend.core.config import settings
from encuestas_backend.core.exceptions import StorageError, ValidationError
from encuestas_backend.api import auth, users, proyectos, encuestas

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Encuestas API",
    description="API para la gestión de proyectos, encuestas y resultados",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    """Any storage failure that escapes a service becomes a 500 with the backend message."""
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
    error = StorageError(str(getattr(exc, "orig", None) or exc))
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are a 400; bad path or query values keep the default 422."""
    errors = exc.errors()
    if not any(error["loc"] and error["loc"][0] == "body" for error in errors):
        return await request_validation_exception_handler(request, exc)

    error = ValidationError()
    return JSONResponse(
        status_code=error.status_code,
        content={"detail": error.detail, "errors": jsonable_encoder(errors)},
    )


# Routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(proyectos.router)
app.include_router(encuestas.router)
app.include_router(encuestas.encuesta_router)


@app.get("/")
def root():
    return {"message": "Backend funcionando", "docs": "/docs"}


@app.get("/health")
def health_check():
    return {"status": "ok", "environment": settings.ENVIRONMENT}
