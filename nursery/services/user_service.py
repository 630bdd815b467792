from typing import List

from sqlalchemy.orm import Session

from nursery.data.models.user import UserModel
from nursery.data.unit_of_work import unit_of_work
from nursery.domain.errors import CustomerHasOrders, CustomerNotFound, ValidationError
from nursery.domain.schemas import UserCreate, UserRead
from nursery.repos.order_repo import OrderRepo
from nursery.repos.user_repo import UserRepo
from nursery.utils.settings import ADMIN_EMAIL, ADMIN_NAME
from nursery.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepo(db)
        self.orders = OrderRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        if self.repo.get_by_email(payload.email):
            raise ValidationError("User already exists")

        user = UserModel(name=payload.name, email=payload.email, phone=payload.phone)
        created = self.repo.create_user(user)
        logger.info(f"Customer {created.id} registered")
        return UserRead.model_validate(created)

    def get_user(self, user_id: int) -> UserRead:
        user = self.repo.get_user(user_id)
        if not user:
            raise CustomerNotFound(user_id)
        return UserRead.model_validate(user)

    #admin
    def list_customers(self) -> List[UserModel]:
        return self.repo.list_customers()

    def get_customer(self, customer_id: int) -> UserModel:
        user = self.repo.get_user(customer_id)
        if not user or user.user_type != "customer":
            raise CustomerNotFound(customer_id)
        return user

    def delete_customer(self, customer_id: int) -> None:
        """
        Usuwa konto klienta. Klient z zamowieniami zostaje (CustomerHasOrders),
        konta admina nie da sie tu usunac.
        """
        with unit_of_work(self.db, "customer deletion"):
            self.get_customer(customer_id)
            orders = self.orders.count_orders(customer_id=customer_id)
            if orders:
                raise CustomerHasOrders(customer_id, orders)
            self.repo.delete_user(customer_id)
        logger.info(f"Customer {customer_id} deleted")

    def ensure_admin(self) -> UserModel:
        """Konto admina tworzone przy starcie, jesli go nie ma."""
        admin = self.repo.get_by_email(ADMIN_EMAIL)
        if admin:
            return admin

        admin = self.repo.create_user(UserModel(name=ADMIN_NAME, email=ADMIN_EMAIL, user_type="admin"))
        logger.info(f"Admin user {admin.id} created")
        return admin
