"""Shared router dependencies."""
from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.orm import Session

from encuestas_backend.core.database import get_db

# Request-scoped session
DbSession = Annotated[Session, Depends(get_db)]

# Identifiers in paths must be positive integers; anything else is a 422
SurveyId = Annotated[int, Path(gt=0, description="Survey ID")]
ClientId = Annotated[int, Path(gt=0, description="Client ID")]
ProjectId = Annotated[int, Path(gt=0, description="Project ID")]
