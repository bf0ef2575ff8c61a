from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple, Type

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    MethodNotAllowed,
    NotFound,
    ParseError,
    UnsupportedMediaType,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

SERVER_ERROR_MESSAGE = "Something went wrong"

# exception type -> (code, fallback message, keep DRF payload as details)
KNOWN_EXCEPTIONS: Tuple[Tuple[Type[Exception], str, str, bool], ...] = (
    (ValidationError, "VALIDATION_ERROR", "Validation failed", True),
    (ParseError, "VALIDATION_ERROR", "Malformed request", False),
    (NotFound, "NOT_FOUND", "Resource not found", False),
    (Http404, "NOT_FOUND", "Resource not found", False),
    (MethodNotAllowed, "METHOD_NOT_ALLOWED", "Method not allowed", False),
    (UnsupportedMediaType, "UNSUPPORTED_MEDIA_TYPE", "Unsupported media type", False),
)


class ApplicationError(Exception):
    """
    Domain-level error a view may raise instead of returning an error triple.

    Args:
        code: Machine readable error code.
        message: Human readable explanation of the error.
        status_code: Optional explicit HTTP status. If omitted, code mapping is used.
        details: Optional structured details for clients.
    """

    def __init__(
        self,
        code: str,
        message: str,
        *,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details

    def to_response(self) -> Response:
        return error_response(
            self.code, self.message, self.details, http_status=self.status_code
        )


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """DRF exception handler answering every failure with the error envelope."""
    log = _bind_logger(context)

    if isinstance(exc, ApplicationError):
        log.info("Handled application error", code=exc.code, status=exc.status_code)
        return exc.to_response()

    response = drf_exception_handler(exc, context)
    if response is None:
        log.exception("Unhandled exception bubbled to global handler")
        return error_response(
            "SERVER_ERROR",
            SERVER_ERROR_MESSAGE,
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    code, message, details = _describe(exc, response.data)
    log.info("Converted API exception", code=code, status=response.status_code)
    return error_response(code, message, details, http_status=response.status_code)


def _bind_logger(context: Mapping[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view is not None:
        log = log.bind(view=type(view).__name__)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _describe(exc: Exception, payload: Any) -> Tuple[str, str, Optional[Any]]:
    for exc_type, code, fallback, keep_details in KNOWN_EXCEPTIONS:
        if isinstance(exc, exc_type):
            return code, _message_from(payload, fallback), payload if keep_details else None
    # any other APIException; the status DRF picked is kept by the caller
    return "REQUEST_FAILED", _message_from(payload, "Request failed"), None


def _message_from(payload: Any, fallback: str) -> str:
    # ValidationError payloads are field maps; only single detail strings are used
    if isinstance(payload, dict) and isinstance(payload.get("detail"), str):
        return payload["detail"]
    return fallback


__all__ = ["ApplicationError", "global_exception_handler"]
