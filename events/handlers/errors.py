"""Mapping of domain errors to HTTP responses.

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Internal error details
are logged, never returned to the client.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from events.domain.errors import (
    ConflictError,
    DomainError,
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
    UnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"

STATUS_BY_ERROR_KIND: dict[type[DomainError], int] = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidStateError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
}


def domain_error_response(error: DomainError) -> Response:
    if isinstance(error, ValidationError):
        return Response(
            {"errors": list(error.errors)}, status=status.HTTP_400_BAD_REQUEST
        )
    if isinstance(error, UnavailableError):
        return Response(
            {"error": INTERNAL_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    for kind, status_code in STATUS_BY_ERROR_KIND.items():
        if isinstance(error, kind):
            return Response({"error": error.message}, status=status_code)

    logger.error("No HTTP mapping for domain error %s", error.code.value)
    return Response(
        {"error": INTERNAL_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def exception_handler(exc: Exception, context: dict) -> Response:
    if isinstance(exc, DomainError):
        return domain_error_response(exc)

    response = drf_exception_handler(exc, context)
    if response is not None:
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        response.data = {"error": str(detail) if detail else "Bad request"}
        return response

    view = context.get("view")
    logger.error(
        "Unhandled error in %s", type(view).__name__ if view else "unknown view",
        exc_info=exc,
    )
    return Response(
        {"error": INTERNAL_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
