# nursery/domain/errors.py
"""
Wyjatki domenowe. Routery tlumacza je na HTTPException:
NotFound -> 404 (ItemNotFound przy checkoucie -> 400), InsufficientStock/ValidationError -> 400,
CheckoutInProgress/ConcurrentUpdate/CustomerHasOrders -> 409, PersistenceError -> 503.
"""


class NurseryError(Exception):
    pass


class NotFound(NurseryError, LookupError):
    pass


class ItemNotFound(NotFound):
    """Pozycja koszyka wskazuje na produkt, ktorego nie ma (albo jest nieaktywny)."""

    def __init__(self, product_id: int, reason: str = "not found"):
        self.product_id = product_id
        super().__init__(f"Product {product_id} {reason}")


class ProductNotFound(NotFound):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")


class OrderNotFound(NotFound):
    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")


class CustomerNotFound(NotFound):
    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        super().__init__(f"Customer {customer_id} not found")


class ConsultationNotFound(NotFound):
    def __init__(self, consultation_id: int):
        self.consultation_id = consultation_id
        super().__init__(f"Consultation {consultation_id} not found")


class InsufficientStock(NurseryError, ValueError):
    def __init__(self, product_id: int, name: str, available: int, requested: int):
        self.product_id = product_id
        self.name = name
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for {name}. Available: {available}, Requested: {requested}"
        )


class ValidationError(NurseryError, ValueError):
    pass


class CheckoutInProgress(NurseryError):
    pass


class ConcurrentUpdate(NurseryError):
    pass


class PersistenceError(NurseryError):
    pass


class CustomerHasOrders(NurseryError):
    """Klient z zamowieniami zostaje - historia zamowien wskazuje na niego."""

    def __init__(self, customer_id: int, orders: int):
        self.customer_id = customer_id
        self.orders = orders
        super().__init__(f"Customer {customer_id} has {orders} order(s) and cannot be deleted")
