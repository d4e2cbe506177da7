"""Survey response models."""
from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from encuestas_backend.core.database import Base


class SurveyResponse(Base):
    """
    Survey response header - one client's submission for one survey.
    A client can submit each survey at most once.
    """

    __tablename__ = "respuesta"

    id = Column("idrespuesta", Integer, primary_key=True, index=True)
    survey_id = Column("idencuesta", Integer, ForeignKey("encuesta.idencuesta", ondelete="CASCADE"), nullable=False, index=True)
    client_id = Column("idcliente", Integer, ForeignKey("cliente.idcliente", ondelete="CASCADE"), nullable=False, index=True)
    fecha = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    survey = relationship("Survey", back_populates="responses")
    client = relationship("Client", back_populates="responses")
    details = relationship("ResponseDetail", back_populates="response", order_by="ResponseDetail.id")

    __table_args__ = (
        UniqueConstraint("idencuesta", "idcliente", name="uq_respuesta_encuesta_cliente"),
    )

    def __repr__(self):
        return f"<SurveyResponse(id={self.id}, survey_id={self.survey_id}, client_id={self.client_id})>"


class ResponseDetail(Base):
    """
    One answer within a response.
    Free text for open questions, selected option for the rest.
    """

    __tablename__ = "detalle_respuesta"

    id = Column("iddetalle", Integer, primary_key=True, index=True)
    response_id = Column("idrespuesta", Integer, ForeignKey("respuesta.idrespuesta", ondelete="CASCADE"), nullable=False, index=True)
    question_id = Column("idpregunta", Integer, ForeignKey("pregunta.idpregunta", ondelete="RESTRICT"), nullable=False, index=True)
    contenido_texto = Column(Text, nullable=True)
    option_id = Column("idopcion", Integer, ForeignKey("opcion.idopcion", ondelete="RESTRICT"), nullable=True, index=True)

    # Relationships
    response = relationship("SurveyResponse", back_populates="details")
    question = relationship("Question")
    option = relationship("AnswerOption")

    __table_args__ = (
        CheckConstraint(
            "(contenido_texto IS NULL) <> (idopcion IS NULL)",
            name="check_detalle_un_valor",
        ),
    )

    def __repr__(self):
        return f"<ResponseDetail(id={self.id}, question_id={self.question_id})>"
