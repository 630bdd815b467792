# nursery/repos/order_repo.py
from typing import List

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session, selectinload

from nursery.data.models.order import OrderModel
from nursery.data.models.order_item import OrderItemModel
from nursery.data.models.product import ProductModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        #bez commita - zamowienie wchodzi w te sama transakcje co zdjecie stanow
        self.db.add(order)
        self.db.flush()
        return order

    def get_by_order_id(self, order_id: str) -> OrderModel | None:
        return self.db.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.order_id == order_id)
        ).scalar_one_or_none()

    def list_orders(
        self,
        customer_id: int | None = None,
        status: str | None = None,
        limit: int | None = None,
    ) -> List[OrderModel]:
        query = select(OrderModel).options(selectinload(OrderModel.items))

        if customer_id is not None:
            query = query.where(OrderModel.customer_id == customer_id)
        if status:
            query = query.where(OrderModel.fulfillment_status == status)

        query = query.order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
        if limit:
            query = query.limit(limit)

        return list(self.db.execute(query).scalars().all())

    def update_status(self, pk: int, old_status: str, new_status: str) -> int:
        # optimistic locking na polu statusu
        # UPDATE orders SET fulfillment_status = 'shipped' WHERE id = 1 AND fulfillment_status = 'processing'
        result = self.db.execute(
            update(OrderModel)
            .where(OrderModel.id == pk, OrderModel.fulfillment_status == old_status)
            .values(fulfillment_status=new_status)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def delete_order(self, order: OrderModel) -> bool:
        self.db.execute(
            delete(OrderItemModel)
            .where(OrderItemModel.order_pk == order.id)
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(
            delete(OrderModel)
            .where(OrderModel.id == order.id)
            .execution_options(synchronize_session=False)
        )
        self.db.expunge(order)
        return result.rowcount > 0

    def count_orders(
        self,
        payment_status: str | None = None,
        since=None,
        customer_id: int | None = None,
    ) -> int:
        query = select(func.count(OrderModel.id))
        if customer_id is not None:
            query = query.where(OrderModel.customer_id == customer_id)
        if payment_status:
            query = query.where(OrderModel.payment_status == payment_status)
        if since is not None:
            query = query.where(OrderModel.created_at >= since)
        return self.db.execute(query).scalar_one()

    def sum_revenue(self, since=None):
        query = select(func.coalesce(func.sum(OrderModel.total), 0)).where(
            OrderModel.payment_status == "completed"
        )
        if since is not None:
            query = query.where(OrderModel.created_at >= since)
        return self.db.execute(query).scalar_one()

    def order_facts_since(self, since, payment_status: str | None = None):
        """(created_at, total, customer_id) zamowien od `since` - do wykresow."""
        query = select(OrderModel.created_at, OrderModel.total, OrderModel.customer_id).where(
            OrderModel.created_at >= since
        )
        if payment_status:
            query = query.where(OrderModel.payment_status == payment_status)
        return self.db.execute(query).all()

    def revenue_by_category(self):
        # pozycje usunietych produktow wypadaja z joina
        query = (
            select(
                ProductModel.category,
                func.sum(OrderItemModel.quantity * OrderItemModel.price).label("revenue"),
                func.count(func.distinct(OrderModel.id)).label("orders"),
            )
            .select_from(OrderItemModel)
            .join(OrderModel, OrderItemModel.order_pk == OrderModel.id)
            .join(ProductModel, OrderItemModel.product_id == ProductModel.id)
            .where(OrderModel.payment_status == "completed")
            .group_by(ProductModel.category)
            .order_by(ProductModel.category)
        )
        return self.db.execute(query).all()
