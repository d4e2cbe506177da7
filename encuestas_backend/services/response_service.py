"""Response recording service."""
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from encuestas_backend.core.exceptions import ConflictError, NotFoundError
from encuestas_backend.repositories.response_repository import ResponseRepository
from encuestas_backend.repositories.survey_repository import SurveyRepository
from encuestas_backend.repositories.user_repository import UserRepository
from encuestas_backend.models.response import SurveyResponse
from encuestas_backend.schemas.response import SurveyResponseCreate, ClientAnswers, AnswerDetail

logger = logging.getLogger(__name__)


class ResponseService:
    """Survey response business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.response_repo = ResponseRepository(db)
        self.survey_repo = SurveyRepository(db)
        self.user_repo = UserRepository(db)

    def record_response(self, response_data: SurveyResponseCreate) -> SurveyResponse:
        """
        Store one client's answers for one survey.

        The header and every detail are written in a single transaction.
        Options are stored as sent; they are not checked against the
        question or survey.

        Raises:
            NotFoundError: If the survey or client does not exist
            ConflictError: If the client already answered the survey
        """
        survey_id = response_data.encuesta_id
        client_id = response_data.cliente_id

        if not self.survey_repo.exists(survey_id):
            raise NotFoundError("Encuesta no encontrada")
        if self.user_repo.get_client_by_id(client_id) is None:
            raise NotFoundError("Cliente no encontrado")
        if self.response_repo.exists_for_client(survey_id, client_id):
            raise ConflictError("El cliente ya respondió esta encuesta")

        try:
            response = self.response_repo.create(survey_id=survey_id, client_id=client_id)
            for answer in response_data.respuestas:
                self.response_repo.create_detail(
                    response_id=response.id,
                    question_id=answer.pregunta_id,
                    contenido_texto=answer.contenido_texto,
                    option_id=answer.opcion_id,
                )
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if self.response_repo.exists_for_client(survey_id, client_id):
                raise ConflictError("El cliente ya respondió esta encuesta")
            logger.error(f"Error recording response for survey {survey_id}, client {client_id}: {e}")
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error recording response for survey {survey_id}, client {client_id}: {e}")
            raise

        logger.info(
            f"Response recorded: id={response.id}, survey={survey_id}, "
            f"client={client_id}, answers={len(response_data.respuestas)}"
        )
        return response

    def get_client_answers(self, survey_id: int, client_id: int) -> ClientAnswers:
        """
        Answers a client submitted for a survey.

        Raises:
            NotFoundError: If the client has no response for the survey
        """
        response = self.response_repo.get_for_client(survey_id, client_id)

        if not response:
            raise NotFoundError("No hay respuestas para este cliente en la encuesta")

        return ClientAnswers(
            idrespuesta=response.id,
            idencuesta=response.survey_id,
            idcliente=response.client_id,
            fecha=response.fecha,
            respuestas=[
                AnswerDetail(
                    idpregunta=detail.question_id,
                    pregunta=detail.question.pregunta if detail.question else None,
                    tipo=detail.question.tipo if detail.question else None,
                    contenido_texto=detail.contenido_texto,
                    idopcion=detail.option_id,
                    opcion=detail.option.opcion if detail.option else None,
                )
                for detail in response.details
            ],
        )
