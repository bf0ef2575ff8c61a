from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple

from rest_framework import status
from rest_framework.response import Response

DEFAULT_ERROR_STATUS = status.HTTP_400_BAD_REQUEST

ERROR_STATUS_MAP = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "METHOD_NOT_ALLOWED": status.HTTP_405_METHOD_NOT_ALLOWED,
    "UNSUPPORTED_MEDIA_TYPE": status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    "SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for_code(code: str) -> int:
    return ERROR_STATUS_MAP.get(code.strip().upper(), DEFAULT_ERROR_STATUS)


def _normalize_details(details: Any) -> Any:
    if isinstance(details, Mapping):
        return dict(details)
    return details


def _require_text(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"error_response requires {name} to be a string")
    value = value.strip()
    if not value:
        raise ValueError(f"error_response requires a non-empty {name}")
    return value


def error_payload(
    code: str,
    message: str,
    details: Optional[Any] = None,
    http_status: Optional[int] = None,
) -> Tuple[Dict[str, Any], int]:
    """Envelope body and status for an error, without a response object.

    Plain Django views (the URL-level 404 handler) render this themselves;
    DRF views go through ``error_response``.
    """
    normalized_code = _require_text("code", code).upper()
    message = _require_text("message", message)
    status_code = (
        int(http_status) if http_status is not None else status_for_code(normalized_code)
    )
    if not 100 <= status_code <= 599:
        raise ValueError("error_response status must be a valid HTTP status code")

    error: Dict[str, Any] = {
        "code": normalized_code,
        "message": message,
        "status": status_code,
    }
    if details is not None:
        error["details"] = _normalize_details(details)
    return {"error": error}, status_code


def error_response(
    code: str,
    message: str,
    details: Optional[Any] = None,
    http_status: Optional[int] = None,
) -> Response:
    """
    Build the error envelope every endpoint answers failures with.

    Args:
        code: Machine-readable error identifier, e.g. ``NOT_FOUND``.
        message: Human-readable explanation of the error.
        details: Optional context such as serializer errors or offending ids.
        http_status: Explicit HTTP status; defaults to the mapping for ``code``.
    """
    body, status_code = error_payload(code, message, details, http_status)
    return Response(body, status=status_code)
