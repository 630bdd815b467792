from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from nursery.data.database import Base


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    order_id = Column(String, nullable=False, unique=True, index=True)  # ORD-<ms>-<suffix>
    transaction_id = Column(String, nullable=False, unique=True)  # TXN-<ms>-<suffix>

    customer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    customer_name = Column(String, nullable=True)
    customer_email = Column(String, nullable=True)

    #kwoty liczone raz przy tworzeniu, nigdy nie przeliczane
    subtotal = Column(Numeric(10, 2), nullable=False)
    bulk_discount = Column(Numeric(10, 2), nullable=False, default=0)
    tax = Column(Numeric(10, 2), nullable=False)
    shipping = Column(Numeric(10, 2), nullable=False)
    cod_charge = Column(Numeric(10, 2), nullable=False, default=0)
    total = Column(Numeric(10, 2), nullable=False)

    payment_method = Column(String, nullable=False)  # credit_card, upi, cod
    payment_reference = Column(String, nullable=True)
    payment_status = Column(String, nullable=False, default="pending")  # pending, completed
    fulfillment_status = Column(String, nullable=False, default="processing", index=True)  # processing, shipped, delivered

    delivery_details = Column(JSON, nullable=True)
    schedule = Column(JSON, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
    )
