# freshcart/services/notification_service.py
from freshcart.celery_worker import celery_app
from freshcart.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Serwis do wysylania powiadomien.
    Uzywa Celery do asynchronicznego przetwarzania.
    """

    @staticmethod
    def send_order_notification(user_id: str, order_id: str):
        send_order_notification_task.delay(user_id, order_id)

    @staticmethod
    def send_payment_notification(order_id: str, payment_status: str):
        send_payment_notification_task.delay(order_id, payment_status)


@celery_app.task(name="freshcart.services.notification_service.send_order_notification_task")
def send_order_notification_task(user_id: str, order_id: str):
    logger.info(f"[NOTIFICATION] User {user_id}: Order {order_id} has been placed")
    return {"user_id": user_id, "order_id": order_id, "status": "sent"}


@celery_app.task(name="freshcart.services.notification_service.send_payment_notification_task")
def send_payment_notification_task(order_id: str, payment_status: str):
    logger.info(f"[NOTIFICATION] Order {order_id}: payment {payment_status}")
    return {"order_id": order_id, "payment_status": payment_status, "status": "sent"}
