"""Survey, question and option models."""
from enum import Enum

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from encuestas_backend.core.database import Base


class QuestionType(str, Enum):
    """Question types."""
    OPCION_MULTIPLE = "opcion_multiple"
    ABIERTA = "abierta"
    ESCALA = "escala"

    @property
    def has_options(self) -> bool:
        return self in (QuestionType.OPCION_MULTIPLE, QuestionType.ESCALA)


class Survey(Base):
    """Survey - owned by a project, created by an administrator."""

    __tablename__ = "encuesta"

    id = Column("idencuesta", Integer, primary_key=True, index=True)
    titulo = Column(String(255), nullable=False)
    fecha = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    project_id = Column("idproyecto", Integer, ForeignKey("proyecto.idproyecto", ondelete="SET NULL"), nullable=True, index=True)
    admin_id = Column("idadmin", Integer, ForeignKey("administrador.idadmin", ondelete="SET NULL"), nullable=True)

    # Relationships
    project = relationship("Project", back_populates="surveys")
    administrator = relationship("Administrator", back_populates="surveys")
    questions = relationship("Question", back_populates="survey", order_by="Question.id")
    responses = relationship("SurveyResponse", back_populates="survey")

    def __repr__(self):
        return f"<Survey(id={self.id}, titulo={self.titulo}, project_id={self.project_id})>"


class Question(Base):
    """Question within a survey."""

    __tablename__ = "pregunta"

    id = Column("idpregunta", Integer, primary_key=True, index=True)
    survey_id = Column("idencuesta", Integer, ForeignKey("encuesta.idencuesta", ondelete="CASCADE"), nullable=False, index=True)
    pregunta = Column(Text, nullable=False)
    tipo = Column(SQLEnum(QuestionType), nullable=False)

    # Relationships
    survey = relationship("Survey", back_populates="questions")
    options = relationship("AnswerOption", back_populates="question", order_by="AnswerOption.id")

    def __repr__(self):
        return f"<Question(id={self.id}, survey_id={self.survey_id}, tipo={self.tipo})>"


class AnswerOption(Base):
    """Selectable option for multiple-choice and scale questions."""

    __tablename__ = "opcion"

    id = Column("idopcion", Integer, primary_key=True, index=True)
    question_id = Column("idpregunta", Integer, ForeignKey("pregunta.idpregunta", ondelete="CASCADE"), nullable=False, index=True)
    opcion = Column(String(500), nullable=False)

    # Relationships
    question = relationship("Question", back_populates="options")

    def __repr__(self):
        return f"<AnswerOption(id={self.id}, question_id={self.question_id})>"
