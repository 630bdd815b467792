# nursery/services/catalog_service.py
import math
from typing import Any, Dict

from sqlalchemy.orm import Session

from nursery.data.models.product import ProductModel
from nursery.data.unit_of_work import unit_of_work
from nursery.domain.errors import ProductNotFound
from nursery.domain.schemas import ProductCreate, ProductUpdate
from nursery.repos.product_repo import ProductRepo
from nursery.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogService:
    """
    Katalog roslin: przegladanie dla klientow, CRUD + restock dla admina.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepo(db)

    #query
    def list_products(
        self,
        category: str | None = None,
        search: str | None = None,
        status: str | None = None,
        page: int = 1,
        limit: int = 12,
    ) -> Dict[str, Any]:
        products, total = self.repo.list_products(
            category=category,
            search=search,
            status=status,
            page=page,
            limit=limit,
        )
        return {
            "products": products,
            "total": total,
            "total_pages": math.ceil(total / limit) if total else 0,
            "current_page": page,
        }

    def get_product(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise ProductNotFound(product_id)
        return product

    #commands
    def create_product(self, payload: ProductCreate) -> ProductModel:
        with unit_of_work(self.db, "product creation"):
            product = self.repo.add_product(ProductModel(**payload.model_dump()))
        logger.info(f"Product {product.id} ({product.name}) added with stock {product.stock}")
        return product

    def update_product(self, product_id: int, payload: ProductUpdate) -> ProductModel:
        with unit_of_work(self.db, "product update"):
            product = self.get_product(product_id)
            for field, value in payload.model_dump(exclude_unset=True).items():
                setattr(product, field, value)
        return self.get_product(product_id)

    def set_stock(self, product_id: int, stock: int) -> ProductModel:
        """Restock admina - ten sam atomowy UPDATE co checkout i anulowanie."""
        with unit_of_work(self.db, "restock"):
            if not self.repo.set_stock(product_id, stock):
                raise ProductNotFound(product_id)
        logger.info(f"Product {product_id} restocked to {stock}")
        return self.get_product(product_id)

    def toggle_status(self, product_id: int) -> ProductModel:
        with unit_of_work(self.db, "status toggle"):
            product = self.get_product(product_id)
            product.status = "inactive" if product.status == "active" else "active"
        logger.info(f"Product {product_id} is now {product.status}")
        return product

    def delete_product(self, product_id: int) -> None:
        # zamowienia trzymaja snapshot, wiec produkt mozna usunac
        with unit_of_work(self.db, "product deletion"):
            if not self.repo.delete_product(product_id):
                raise ProductNotFound(product_id)
        logger.info(f"Product {product_id} deleted")
