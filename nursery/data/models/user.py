from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime
from nursery.data.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    phone = Column(String, nullable=True)
    user_type = Column(String, nullable=False, default="customer")  # customer, admin
    registered_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
