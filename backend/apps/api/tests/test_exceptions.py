from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import MethodNotAllowed, ParseError, ValidationError
from rest_framework.test import APIRequestFactory

from apps.api.exceptions import ApplicationError, global_exception_handler

factory = APIRequestFactory()


class DummyView:
    pass


def _context(request):
    return {"request": request, "view": DummyView()}


def test_application_error_returns_structured_response():
    request = factory.post("/api/users/3/change-password")
    exc = ApplicationError(
        "UNAUTHORIZED",
        "Old password does not match",
        details={"id": "3"},
    )
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert payload["code"] == "UNAUTHORIZED"
    assert payload["message"] == "Old password does not match"
    assert payload["details"] == {"id": "3"}


def test_application_error_explicit_status_wins():
    exc = ApplicationError("NOT_FOUND", "Product not found", status_code=410, details={"id": "9"})
    response = exc.to_response()
    assert response.status_code == 410
    assert response.data["error"]["status"] == 410
    assert response.data["error"]["details"] == {"id": "9"}


def test_validation_error_preserves_details():
    request = factory.post("/api/products/create", data={})
    exc = ValidationError({"name": ["This field is required."]})
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["message"] == "Validation failed"
    assert payload["details"] == {"name": ["This field is required."]}


def test_parse_error_maps_to_validation_error_without_details():
    request = factory.post("/api/products/create")
    response = global_exception_handler(ParseError(), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["code"] == "VALIDATION_ERROR"
    assert "details" not in payload


def test_http404_maps_to_not_found():
    request = factory.get("/api/products/1")
    response = global_exception_handler(Http404(), _context(request))
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.data["error"]["code"] == "NOT_FOUND"


def test_method_not_allowed_maps_to_405():
    request = factory.patch("/api/products/1")
    response = global_exception_handler(MethodNotAllowed("PATCH"), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert payload["code"] == "METHOD_NOT_ALLOWED"


def test_unhandled_exception_returns_generic_message():
    request = factory.get("/api/products")
    response = global_exception_handler(RuntimeError("boom"), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert payload["code"] == "SERVER_ERROR"
    assert payload["message"] == "Something went wrong"
    assert "details" not in payload
