import os

from celery import Celery
from celery.schedules import crontab  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

app = Celery("etnair")

app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()


# ============================================================================
# CELERY BEAT SCHEDULE (Periodic Tasks)
# ============================================================================

app.conf.beat_schedule = {
    # Drop revocation rows of tokens that have expired on their own - hourly
    "purge-expired-token-revocations": {
        "task": "users.purge_expired_revocations",
        "schedule": crontab(minute=30),
    },
}

app.conf.timezone = "UTC"
