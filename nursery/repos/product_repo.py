# nursery/repos/product_repo.py
from typing import List, Tuple

from sqlalchemy import func, or_, select, update
from sqlalchemy.orm import Session

from nursery.data.models.product import ProductModel
from nursery.domain.errors import InsufficientStock, ProductNotFound, ValidationError


class ProductRepo:
    """
    Katalog produktow.
    Wszystkie zmiany stock (checkout, anulowanie, restock) ida jednym UPDATE-em,
    nigdy przez odczyt -> zmiana w pythonie -> zapis.
    Repo nie commituje - robi to unit of work / serwis.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def current_stock(self, product_id: int) -> int | None:
        #zawsze z bazy, nie z identity mapy sesji
        return self.db.execute(
            select(ProductModel.stock).where(ProductModel.id == product_id)
        ).scalar_one_or_none()

    def list_products(
        self,
        category: str | None = None,
        search: str | None = None,
        status: str | None = None,
        page: int = 1,
        limit: int = 12,
    ) -> Tuple[List[ProductModel], int]:
        query = select(ProductModel)

        if category and category != "all":
            query = query.where(ProductModel.category == category)
        if status:
            query = query.where(ProductModel.status == status)
        if search:
            pattern = f"%{search.lower()}%"
            query = query.where(
                or_(
                    func.lower(ProductModel.name).like(pattern),
                    func.lower(ProductModel.description).like(pattern),
                    func.lower(ProductModel.category).like(pattern),
                )
            )

        total = self.db.execute(
            select(func.count()).select_from(query.subquery())
        ).scalar_one()

        products = self.db.execute(
            query.order_by(ProductModel.created_at.desc(), ProductModel.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        ).scalars().all()

        return list(products), total

    def add_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.flush()
        return product

    def delete_product(self, product_id: int) -> bool:
        product = self.get_product(product_id)
        if not product:
            return False
        self.db.delete(product)
        self.db.flush()
        return True

    def decrement_stock(self, product_id: int, quantity: int) -> Tuple[int, int]:
        """
        Warunkowe zdjecie ze stanu: UPDATE ... SET stock = stock - q WHERE id = ? AND stock >= q
        Dwa rownolegle checkouty nie przejda obu sprawdzen - baza blokuje wiersz.
        Zwraca (stary, nowy) stan.
        """
        result = self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id, ProductModel.stock >= quantity)
            .values(stock=ProductModel.stock - quantity)
            .execution_options(synchronize_session=False)
        )

        if result.rowcount == 0:
            product = self.get_product(product_id)
            if not product:
                raise ProductNotFound(product_id)
            available = self.current_stock(product_id)
            raise InsufficientStock(product_id, product.name, available, quantity)

        new_stock = self.current_stock(product_id)
        return new_stock + quantity, new_stock

    def increment_stock(self, product_id: int, quantity: int) -> bool:
        result = self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(stock=ProductModel.stock + quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    def set_stock(self, product_id: int, new_stock: int) -> bool:
        if new_stock < 0:
            raise ValidationError(f"Stock cannot be negative: {new_stock}")
        result = self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(stock=new_stock)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    def count_products(self) -> int:
        return self.db.execute(select(func.count(ProductModel.id))).scalar_one()
