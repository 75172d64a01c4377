from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import ProtectedError
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, UnsupportedMediaType, ValidationError
from rest_framework.test import APIRequestFactory

from apps.api.exceptions import global_exception_handler

factory = APIRequestFactory()


class DummyView:
    pass


def _context(request):
    return {"request": request, "view": DummyView()}


def test_validation_error_preserves_details():
    request = factory.post("/api/cart/add", data={})
    exc = ValidationError({"jewelleryId": ["This field is required."]})
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["message"] == "Validation failed"
    assert payload["details"] == {"jewelleryId": ["This field is required."]}


def test_django_validation_error_is_converted():
    request = factory.post("/api/address", data={})
    exc = DjangoValidationError({"street": ["Too long."]})
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["details"] == {"street": ["Too long."]}


def test_missing_credentials_become_unauthorized():
    request = factory.get("/api/cart")
    response = global_exception_handler(NotAuthenticated(), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert payload["code"] == "UNAUTHORIZED"


def test_unhandled_exception_returns_generic_message():
    request = factory.get("/api/order")
    response = global_exception_handler(RuntimeError("boom"), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert payload["code"] == "SERVER_ERROR"
    assert payload["message"] == "Something went wrong"
    assert "details" not in payload


class OrderItem:
    pass


def test_protected_delete_becomes_conflict():
    request = factory.delete("/api/jewellery/5")
    exc = ProtectedError("Cannot delete", [OrderItem(), OrderItem()])
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_409_CONFLICT
    assert payload["code"] == "CONFLICT"
    assert payload["details"] == {"referencedBy": ["OrderItem"]}


def test_other_drf_errors_use_status_defaults():
    request = factory.post("/api/cart/add")
    exc = UnsupportedMediaType("text/plain")
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    assert payload["code"] == "UNSUPPORTED_MEDIA_TYPE"
    assert payload["message"] == 'Unsupported media type "text/plain" in request.'
