# nursery/services/notification_service.py
from nursery.celery_worker import celery_app
from nursery.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Powiadomienia klienta o zamowieniu.
    Celery robi to asynchronicznie, zamowienie jest juz zacommitowane,
    wiec problem z brokerem tylko logujemy - nie wywracamy requestu.
    """

    @staticmethod
    def send_order_placed(customer_id: int, order_id: str):
        try:
            send_order_placed_task.delay(customer_id, order_id)
        except Exception as e:
            logger.warning(f"Could not queue order-placed notification for {order_id}: {e}")

    @staticmethod
    def send_status_changed(customer_id: int, order_id: str, status: str):
        try:
            send_status_changed_task.delay(customer_id, order_id, status)
        except Exception as e:
            logger.warning(f"Could not queue status notification for {order_id}: {e}")


@celery_app.task(name="nursery.services.notification_service.send_order_placed_task")
def send_order_placed_task(customer_id: int, order_id: str):
    """
    W prawdziwym systemie email/SMS z potwierdzeniem. Teraz tylko loguje.
    """
    logger.info(f"[NOTIFICATION] Customer {customer_id}: order {order_id} placed and being processed")
    return {"customer_id": customer_id, "order_id": order_id, "status": "sent"}


@celery_app.task(name="nursery.services.notification_service.send_status_changed_task")
def send_status_changed_task(customer_id: int, order_id: str, status: str):
    logger.info(f"[NOTIFICATION] Customer {customer_id}: order {order_id} is now {status}")
    return {"customer_id": customer_id, "order_id": order_id, "status": status}
