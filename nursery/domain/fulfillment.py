# nursery/domain/fulfillment.py
from enum import Enum


class FulfillmentStatus(str, Enum):
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"


#tabela przejsc: stan -> nastepny stan, stan koncowy wskazuje na siebie
NEXT_STATUS = {
    FulfillmentStatus.PROCESSING: FulfillmentStatus.SHIPPED,
    FulfillmentStatus.SHIPPED: FulfillmentStatus.DELIVERED,
    FulfillmentStatus.DELIVERED: FulfillmentStatus.DELIVERED,
}


def next_status(current: str) -> FulfillmentStatus:
    # ValueError dla nieznanego statusu
    return NEXT_STATUS[FulfillmentStatus(current)]


def is_terminal(status: str) -> bool:
    return next_status(status) == FulfillmentStatus(status)
