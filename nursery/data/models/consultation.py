from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text

from nursery.data.database import Base


class ConsultationModel(Base):
    __tablename__ = "consultations"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String, nullable=False, default="pending", index=True)  # pending, done
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
