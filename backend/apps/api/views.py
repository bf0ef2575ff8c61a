from django.http import JsonResponse

from apps.common import get_logger
from .utils import error_payload

logger = get_logger(__name__).bind(component="api", layer="view")


def not_found(request, exception=None):
    """URL-level 404: no route matched, answered with the API error envelope."""
    logger.info("No route matched", path=getattr(request, "path", None))
    body, status_code = error_payload("NOT_FOUND", "Resource not found")
    return JsonResponse(body, status=status_code)
