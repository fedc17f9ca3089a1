"""DRF exception handler translating domain errors into API responses."""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler, set_rollback  # type: ignore

from shared.domain.errors import DomainError

logger = logging.getLogger(__name__)


def domain_exception_handler(exc, context):  # type: ignore
    """Map ``DomainError`` to its status, keep DRF defaults, hide the rest.

    Unexpected failures (lost connections, unmapped integrity errors) are
    logged with their traceback and answered with a generic 500 body.
    """

    if isinstance(exc, DomainError):
        set_rollback()
        view = context.get("view")
        logger.warning(
            f"{exc.__class__.__name__} in {view.__class__.__name__ if view else 'unknown view'}: {exc.message}"
        )
        return Response({"detail": exc.message, "code": exc.code}, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    set_rollback()
    logger.exception(f"Unhandled error while processing request: {exc}")
    return Response(
        {"detail": "Internal server error.", "code": "internal_error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
