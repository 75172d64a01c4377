from collections.abc import Mapping
from typing import Any, Dict, Optional, Tuple

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.serializers import as_serializer_error

# (code, message, details) as returned by the service layer.
ServiceError = Tuple[str, str, Optional[Any]]

DEFAULT_ERROR_STATUS = status.HTTP_400_BAD_REQUEST

ERROR_STATUS_MAP = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "CART_EMPTY": status.HTTP_400_BAD_REQUEST,
    "INVALID_ADDRESS": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "METHOD_NOT_ALLOWED": status.HTTP_405_METHOD_NOT_ALLOWED,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _normalize_details(details: Any) -> Any:
    if isinstance(details, ValidationError):
        return as_serializer_error(details)
    if isinstance(details, Mapping):
        return dict(details)
    if isinstance(details, Exception):
        return {"type": details.__class__.__name__}
    return details


def _require_text(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"error_response requires {name} to be a string")
    value = value.strip()
    if not value:
        raise ValueError(f"error_response requires a non-empty {name}")
    return value


def error_response(
    code: str,
    message: str,
    details: Optional[Any] = None,
    http_status: Optional[int] = None,
    *,
    hint: Optional[str] = None,
    extra: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """
    Build the error envelope every endpoint returns.

    Shape: ``{"error": {"code", "message", "status", "details"?, "hint"?, "extra"?}}``.
    The HTTP status comes from ``ERROR_STATUS_MAP`` unless ``http_status`` is given;
    unknown codes fall back to 400.
    """
    code = _require_text("code", code).upper()
    message = _require_text("message", message)

    status_code = (
        int(http_status)
        if http_status is not None
        else ERROR_STATUS_MAP.get(code, DEFAULT_ERROR_STATUS)
    )
    if not 100 <= status_code <= 599:
        raise ValueError("error_response status must be a valid HTTP status code")
    if extra is not None and not isinstance(extra, Mapping):
        raise TypeError("error_response extra must be a mapping if provided")

    body: Dict[str, Any] = {"code": code, "message": message, "status": status_code}
    if details is not None:
        body["details"] = _normalize_details(details)
    if hint:
        body["hint"] = hint
    if extra:
        body["extra"] = dict(extra)

    return Response(
        {"error": body},
        status=status_code,
        headers={str(k): str(v) for k, v in headers.items()} if headers else None,
    )


def service_error_response(error: ServiceError, **kwargs: Any) -> Response:
    """Render a service-layer ``(code, message, details)`` tuple."""
    code, message, details = error
    return error_response(code, message, details, **kwargs)
