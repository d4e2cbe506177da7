"""Administrator and client models."""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from encuestas_backend.core.database import Base


class Administrator(Base):
    """Administrator - creates projects and surveys."""

    __tablename__ = "administrador"

    id = Column("idadmin", Integer, primary_key=True, index=True)
    usuario = Column(String(100), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    surveys = relationship("Survey", back_populates="administrator")

    def __repr__(self):
        return f"<Administrator(id={self.id}, usuario={self.usuario})>"


class Client(Base):
    """Client - member of projects, answers their surveys."""

    __tablename__ = "cliente"

    id = Column("idcliente", Integer, primary_key=True, index=True)
    nombre = Column(String(100), nullable=False)
    apellido = Column(String(100), nullable=False)
    usuario = Column(String(100), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    rol = Column(String(50), nullable=False, default="cliente")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    projects = relationship("Project", secondary="proyecto_cliente", back_populates="clients")
    responses = relationship("SurveyResponse", back_populates="client")

    def __repr__(self):
        return f"<Client(id={self.id}, usuario={self.usuario}, rol={self.rol})>"
