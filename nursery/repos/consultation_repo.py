from typing import List

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from nursery.data.models.consultation import ConsultationModel


class ConsultationRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_consultation(self, consultation: ConsultationModel) -> ConsultationModel:
        self.db.add(consultation)
        self.db.flush()
        return consultation

    def get_consultation(self, consultation_id: int) -> ConsultationModel | None:
        return self.db.get(ConsultationModel, consultation_id)

    def list_consultations(self, status: str | None = None) -> List[ConsultationModel]:
        query = select(ConsultationModel)
        if status:
            query = query.where(ConsultationModel.status == status)
        query = query.order_by(ConsultationModel.created_at.desc(), ConsultationModel.id.desc())
        return list(self.db.execute(query).scalars().all())

    def delete_consultation(self, consultation_id: int) -> bool:
        result = self.db.execute(
            delete(ConsultationModel).where(ConsultationModel.id == consultation_id)
        )
        return result.rowcount > 0

    def count_consultations(self, status: str | None = None) -> int:
        query = select(func.count(ConsultationModel.id))
        if status:
            query = query.where(ConsultationModel.status == status)
        return self.db.execute(query).scalar_one()
