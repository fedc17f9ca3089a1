"""Project configuration: settings, URL map, WSGI/ASGI and Celery."""

# Registers the Celery app (and the beat schedule) whenever Django starts.
from .celery import app as celery_app  # noqa: F401
