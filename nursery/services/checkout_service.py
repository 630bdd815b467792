# nursery/services/checkout_service.py
import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Sequence

from redis.exceptions import RedisError
from sqlalchemy.orm import Session

from nursery.data.models.order import OrderModel
from nursery.data.models.order_item import OrderItemModel
from nursery.data.unit_of_work import unit_of_work
from nursery.domain.errors import (
    CheckoutInProgress,
    CustomerNotFound,
    ItemNotFound,
    OrderNotFound,
    PersistenceError,
    ProductNotFound,
)
from nursery.domain.fulfillment import FulfillmentStatus
from nursery.domain.identifiers import new_order_id, new_transaction_id
from nursery.domain.pricing import PricingRules, money, price_order
from nursery.domain.schemas import CartItemIn, DeliveryDetailsIn, OffersIn, PaymentIn, ScheduleIn
from nursery.repos.order_repo import OrderRepo
from nursery.repos.product_repo import ProductRepo
from nursery.repos.user_repo import UserRepo
from nursery.services.lock_service import LockService
from nursery.services.notification_service import NotificationService
from nursery.utils.settings import CHECKOUT_LOCK_TTL_SECONDS
from nursery.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class _Line:
    product_id: int
    name: str
    image: str | None
    price: Decimal
    quantity: int


class CheckoutService:
    """
    Skladanie i anulowanie zamowien.

    place_order: sprawdzenie + zdjecie stanow + zapis zamowienia w jednej transakcji,
    wszystko albo nic. cancel_order: zwrot stanow + usuniecie zamowienia, tez atomowo.
    """

    def __init__(
        self,
        db: Session,
        lock_service: LockService,
        rules: PricingRules | None = None,
        notification_service: NotificationService | None = None,
    ):
        self.db = db
        self.products = ProductRepo(db)
        self.orders = OrderRepo(db)
        self.users = UserRepo(db)
        self.lock_service = lock_service
        self.rules = rules or PricingRules.from_settings()
        self.notification_service = notification_service or NotificationService()

    #command
    def place_order(
        self,
        customer_id: int,
        items: Sequence[CartItemIn],
        payment: PaymentIn,
        schedule: ScheduleIn,
        delivery_details: DeliveryDetailsIn | None = None,
        offers: OffersIn | None = None,
    ) -> Dict[str, Any]:
        offers = offers or OffersIn()

        customer = self.users.get_user(customer_id)
        if not customer:
            raise CustomerNotFound(customer_id)

        token = uuid.uuid4().hex
        try:
            locked = self.lock_service.acquire_checkout_lock(
                customer_id=customer_id,
                token=token,
                ttl=CHECKOUT_LOCK_TTL_SECONDS,
            )
        except RedisError as e:
            logger.error(f"Checkout lock unavailable for customer {customer_id}: {e}")
            raise PersistenceError("Checkout is temporarily unavailable, please try again") from e

        if not locked:
            raise CheckoutInProgress("Another checkout for this customer is already in progress")

        try:
            with unit_of_work(self.db, "checkout"):
                lines = self._reserve_stock(items)

                totals = price_order(
                    lines,
                    payment.method,
                    self.rules,
                    free_shipping=offers.free_shipping,
                    bulk_discount=offers.bulk_discount,
                )

                order = OrderModel(
                    order_id=new_order_id(),
                    transaction_id=new_transaction_id(),
                    customer_id=customer.id,
                    customer_name=customer.name,
                    customer_email=customer.email,
                    subtotal=totals.subtotal,
                    bulk_discount=totals.bulk_discount,
                    tax=totals.tax,
                    shipping=totals.shipping,
                    cod_charge=totals.cod_charge,
                    total=totals.total,
                    payment_method=payment.method,
                    payment_reference=payment.reference(),
                    #platnosc symulowana, brak bramki - od razu completed
                    payment_status="completed",
                    fulfillment_status=FulfillmentStatus.PROCESSING.value,
                    delivery_details=delivery_details.model_dump() if delivery_details else None,
                    schedule=schedule.model_dump(mode="json"),
                    items=[
                        OrderItemModel(
                            position=position,
                            product_id=line.product_id,
                            name=line.name,
                            image=line.image,
                            quantity=line.quantity,
                            price=line.price,
                        )
                        for position, line in enumerate(lines)
                    ],
                )
                self.orders.create_order(order)

                confirmation = {
                    "order_id": order.order_id,
                    "transaction_id": order.transaction_id,
                    "total": totals.total,
                    "status": order.fulfillment_status,
                }
        finally:
            self._release_lock(customer_id, token)

        logger.info(
            f"Order {confirmation['order_id']} placed by customer {customer_id}, "
            f"{len(lines)} line(s), total {confirmation['total']}"
        )
        self.notification_service.send_order_placed(customer_id, confirmation["order_id"])

        return confirmation

    def _reserve_stock(self, items: Sequence[CartItemIn]) -> List[_Line]:
        # kolejnosc jak w koszyku, duplikaty produktu NIE sa sklejane -
        # kazda pozycja to osobne zdjecie ze stanu, widzi efekt poprzedniej
        lines: List[_Line] = []
        for item in items:
            product = self.products.get_product(item.product_id)
            if not product:
                raise ItemNotFound(item.product_id)
            if product.status != "active":
                raise ItemNotFound(item.product_id, "is not available")

            try:
                old, new = self.products.decrement_stock(product.id, item.quantity)
            except ProductNotFound:
                # usuniety w miedzyczasie
                raise ItemNotFound(item.product_id)

            logger.info(f"Stock of product {product.id} decremented {old} -> {new}")

            lines.append(
                _Line(
                    product_id=product.id,
                    name=product.name,
                    image=product.image,
                    price=money(product.price),
                    quantity=item.quantity,
                )
            )
        return lines

    def _release_lock(self, customer_id: int, token: str) -> None:
        try:
            self.lock_service.release_checkout_lock(customer_id, token)
        except RedisError as e:
            # TTL i tak zwolni klucz
            logger.warning(f"Failed to release checkout lock for customer {customer_id}: {e}")

    #command
    def cancel_order(self, order_id: str) -> None:
        with unit_of_work(self.db, "order cancellation"):
            order = self.orders.get_by_order_id(order_id)
            if not order:
                raise OrderNotFound(order_id)

            for item in order.items:
                restored = self.products.increment_stock(item.product_id, item.quantity)
                if restored:
                    logger.info(f"Stock of product {item.product_id} restored by {item.quantity}")
                else:
                    logger.info(f"Product {item.product_id} no longer exists, skipping restore")

            if not self.orders.delete_order(order):
                # ktos usunal rownolegle - cofamy zwrot stanow
                raise OrderNotFound(order_id)

        logger.info(f"Order {order_id} deleted and stock restored")
