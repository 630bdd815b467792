#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from nursery.data.models.user import UserModel
from nursery.data.models.product import ProductModel
from nursery.data.models.order import OrderModel
from nursery.data.models.order_item import OrderItemModel
from nursery.data.models.consultation import ConsultationModel

__all__ = ["UserModel", "ProductModel", "OrderModel", "OrderItemModel", "ConsultationModel"]
