"""Survey response data access."""
from datetime import datetime, timezone
from typing import List, Optional, Set

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from encuestas_backend.models.response import SurveyResponse, ResponseDetail


class ResponseRepository:
    """Queries over respuesta and detalle_respuesta."""

    def __init__(self, db: Session):
        self.db = db

    def exists_for_client(self, survey_id: int, client_id: int) -> bool:
        return self.db.query(SurveyResponse.id).filter(
            SurveyResponse.survey_id == survey_id,
            SurveyResponse.client_id == client_id,
        ).first() is not None

    def get_responded_survey_ids(self, client_id: int) -> Set[int]:
        rows = self.db.query(SurveyResponse.survey_id).filter(
            SurveyResponse.client_id == client_id
        ).distinct().all()
        return {survey_id for (survey_id,) in rows}

    def get_for_client(self, survey_id: int, client_id: int) -> Optional[SurveyResponse]:
        """Response header with details, questions and chosen options loaded."""
        return (
            self.db.query(SurveyResponse)
            .options(
                joinedload(SurveyResponse.details).joinedload(ResponseDetail.question),
                joinedload(SurveyResponse.details).joinedload(ResponseDetail.option),
            )
            .filter(
                SurveyResponse.survey_id == survey_id,
                SurveyResponse.client_id == client_id,
            )
            .order_by(SurveyResponse.id)
            .first()
        )

    def create(self, survey_id: int, client_id: int) -> SurveyResponse:
        response = SurveyResponse(
            survey_id=survey_id,
            client_id=client_id,
            fecha=datetime.now(timezone.utc),
        )
        self.db.add(response)
        self.db.flush()
        return response

    def create_detail(self, response_id: int, question_id: int,
                      contenido_texto: Optional[str] = None,
                      option_id: Optional[int] = None) -> ResponseDetail:
        detail = ResponseDetail(
            response_id=response_id,
            question_id=question_id,
            contenido_texto=contenido_texto,
            option_id=option_id,
        )
        self.db.add(detail)
        self.db.flush()
        return detail

    def count_by_option(self, option_id: int) -> int:
        """Exact number of details that selected the option."""
        return self.db.query(func.count(ResponseDetail.id)).filter(
            ResponseDetail.option_id == option_id
        ).scalar() or 0

    def get_texts_for_question(self, question_id: int) -> List[str]:
        rows = self.db.query(ResponseDetail.contenido_texto).filter(
            ResponseDetail.question_id == question_id,
            ResponseDetail.contenido_texto.isnot(None),
        ).order_by(ResponseDetail.id).all()
        return [texto for (texto,) in rows]
