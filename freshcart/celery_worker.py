# freshcart/celery_worker.py
from celery import Celery

from freshcart.utils.settings import CELERY_BROKER_URL, CELERY_RESULT_BACKEND, CELERY_ALWAYS_EAGER

celery_app = Celery(
    "freshcart",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# Explicite importuj taski, zeby Celery je zarejestrowal
celery_app.conf.imports = (
    "freshcart.services.notification_service",
)

celery_app.conf.timezone = "UTC"

# testy / dev bez brokera - taski wykonywane od razu w procesie
celery_app.conf.task_always_eager = CELERY_ALWAYS_EAGER
celery_app.conf.task_store_eager_result = False
