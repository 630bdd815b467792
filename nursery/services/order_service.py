# nursery/services/order_service.py
from typing import List

from sqlalchemy.orm import Session

from nursery.data.models.order import OrderModel
from nursery.data.models.user import UserModel
from nursery.data.unit_of_work import unit_of_work
from nursery.domain.errors import ConcurrentUpdate, OrderNotFound
from nursery.domain.fulfillment import FulfillmentStatus, is_terminal, next_status
from nursery.repos.order_repo import OrderRepo
from nursery.services.notification_service import NotificationService
from nursery.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Odczyt zamowien (query) i przesuwanie statusu realizacji (command, tylko admin).
    """

    def __init__(self, db: Session, notification_service: NotificationService | None = None):
        self.db = db
        self.repo = OrderRepo(db)
        self.notification_service = notification_service or NotificationService()

    def get_order(self, order_id: str, user: UserModel) -> OrderModel:
        """
        Use Case: Pobranie zamowienia (Query). Klient widzi tylko swoje.
        """
        order = self.repo.get_by_order_id(order_id)

        if not order:
            raise OrderNotFound(order_id)

        if user.user_type != "admin" and order.customer_id != user.id:
            raise PermissionError("Access to this order is not allowed")

        return order

    def list_orders(
        self,
        user: UserModel,
        status: str | None = None,
        customer_id: int | None = None,
    ) -> List[OrderModel]:
        if user.user_type != "admin":
            #klient - zawsze tylko wlasne, filtr customer_id ignorowany
            return self.repo.list_orders(customer_id=user.id, status=status)
        return self.repo.list_orders(customer_id=customer_id, status=status)

    def advance_fulfillment(self, order_id: str) -> OrderModel:
        """
        Use Case: processing -> shipped -> delivered, jeden krok na wywolanie.
        Na delivered no-op, zwraca zamowienie bez zmian.
        """
        with unit_of_work(self.db, "status update"):
            order = self.repo.get_by_order_id(order_id)
            if not order:
                raise OrderNotFound(order_id)

            current = FulfillmentStatus(order.fulfillment_status)
            if is_terminal(current):
                logger.info(f"Order {order_id} already {current.value}, nothing to advance")
                return order

            target = next_status(current)

            rowcount = self.repo.update_status(order.id, current.value, target.value)
            if rowcount == 0:
                raise ConcurrentUpdate(
                    f"Order {order_id} was modified by another operation, please refresh"
                )

        logger.info(f"Order {order_id} status {current.value} -> {target.value}")
        self.notification_service.send_status_changed(order.customer_id, order_id, target.value)

        # po commicie obiekt jest expired, przeladuje sie z bazy
        return self.repo.get_by_order_id(order_id)
