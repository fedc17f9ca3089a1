"""Celery tasks for the users domain."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore

from .services import purge_expired_revocations as _purge

logger = logging.getLogger(__name__)


@shared_task(name="users.purge_expired_revocations")
def purge_expired_revocations() -> dict[str, int]:
    """
    Remove revocation rows for tokens that have expired anyway.

    Runs hourly through Celery Beat.

    Returns:
        dict: {"purged": number of deleted rows}
    """
    purged = _purge()
    logger.info(f"purge_expired_revocations finished: {purged} rows")
    return {"purged": purged}
