"""Mapping of domain errors to HTTP responses."""

import logging

from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import DomainError, ErrorCode, InvalidPayloadError

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PAYLOAD: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_NAME_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.TICKET_CODE_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_ALREADY_HAPPENED: status.HTTP_403_FORBIDDEN,
    ErrorCode.TICKET_ALREADY_USED: status.HTTP_409_CONFLICT,
}


def domain_error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    if isinstance(error, InvalidPayloadError):
        body["details"] = error.details
    return Response(body, status=STATUS_BY_CODE[error.code])


def api_exception_handler(exc, context):
    """DRF exception handler that understands domain errors.

    Unparseable request bodies are reported like any other invalid payload.
    Anything not recognised is logged and answered with a bare 500.
    """
    if isinstance(exc, DomainError):
        return domain_error_response(exc)
    if isinstance(exc, ParseError):
        return domain_error_response(InvalidPayloadError({"body": [str(exc.detail)]}))

    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception("Unhandled error in %s", type(view).__name__ if view else "view")
    return Response(
        {"code": "INTERNAL_ERROR", "message": "Internal server error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
