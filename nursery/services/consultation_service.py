# nursery/services/consultation_service.py
from typing import List

from sqlalchemy.orm import Session

from nursery.data.models.consultation import ConsultationModel
from nursery.data.unit_of_work import unit_of_work
from nursery.domain.errors import ConsultationNotFound
from nursery.domain.schemas import ConsultationCreate, ConsultationUpdate
from nursery.repos.consultation_repo import ConsultationRepo
from nursery.utils.logging import get_logger

logger = get_logger(__name__)


class ConsultationService:
    """
    Prosby o konsultacje ogrodnicza. Wysyla kazdy, obsluguje admin
    (pending -> done albo usuniecie).
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = ConsultationRepo(db)

    def submit(self, payload: ConsultationCreate) -> ConsultationModel:
        with unit_of_work(self.db, "consultation request"):
            consultation = self.repo.add_consultation(ConsultationModel(**payload.model_dump()))
        logger.info(f"Consultation {consultation.id} requested by {consultation.email}")
        return consultation

    def list_consultations(self, status: str | None = None) -> List[ConsultationModel]:
        return self.repo.list_consultations(status=status)

    def update(self, consultation_id: int, payload: ConsultationUpdate) -> ConsultationModel:
        with unit_of_work(self.db, "consultation update"):
            consultation = self.repo.get_consultation(consultation_id)
            if not consultation:
                raise ConsultationNotFound(consultation_id)
            for field, value in payload.model_dump(exclude_unset=True).items():
                setattr(consultation, field, value)
        logger.info(f"Consultation {consultation_id} is now {consultation.status}")
        return consultation

    def delete(self, consultation_id: int) -> None:
        with unit_of_work(self.db, "consultation deletion"):
            if not self.repo.delete_consultation(consultation_id):
                raise ConsultationNotFound(consultation_id)
        logger.info(f"Consultation {consultation_id} deleted")
