"""Project and membership models."""
from sqlalchemy import Column, Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from encuestas_backend.core.database import Base


class ProjectMembership(Base):
    """Many-to-many link between projects and clients."""

    __tablename__ = "proyecto_cliente"

    project_id = Column("idproyecto", Integer, ForeignKey("proyecto.idproyecto", ondelete="CASCADE"), primary_key=True)
    client_id = Column("idcliente", Integer, ForeignKey("cliente.idcliente", ondelete="CASCADE"), primary_key=True, index=True)

    def __repr__(self):
        return f"<ProjectMembership(project_id={self.project_id}, client_id={self.client_id})>"


class Project(Base):
    """Project - owns surveys and groups clients."""

    __tablename__ = "proyecto"

    id = Column("idproyecto", Integer, primary_key=True, index=True)
    nombre = Column(String(200), nullable=False)

    # Relationships
    surveys = relationship("Survey", back_populates="project")
    clients = relationship("Client", secondary="proyecto_cliente", back_populates="projects")

    def __repr__(self):
        return f"<Project(id={self.id}, nombre={self.nombre})>"


# Names are unique regardless of case
Index("uq_proyecto_nombre_lower", func.lower(Project.nombre), unique=True)
