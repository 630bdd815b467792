# nursery/celery_worker.py
from celery import Celery
from celery.signals import setup_logging

from nursery.utils.settings import CELERY_BROKER_URL, CELERY_RESULT_BACKEND, CELERY_TASK_ALWAYS_EAGER

celery_app = Celery(
    "nursery",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# WAZNE: explicite importuj taski, zeby Celery je zarejestrowal
celery_app.conf.imports = (
    "nursery.services.notification_service",
)

celery_app.conf.timezone = "UTC"
#w testach taski leca inline, bez brokera
celery_app.conf.task_always_eager = CELERY_TASK_ALWAYS_EAGER


@setup_logging.connect
def _configure_worker_logging(**kwargs):
    from nursery.utils.logging import configure_logging

    configure_logging()
