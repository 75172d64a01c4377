from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Union

from django.core.exceptions import (
    PermissionDenied as DjangoPermissionDenied,
    ValidationError as DjangoValidationError,
)
from django.db.models import ProtectedError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    AuthenticationFailed,
    MethodNotAllowed,
    NotAuthenticated,
    NotFound,
    ParseError,
    PermissionDenied,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

SERVER_ERROR_MESSAGE = "Something went wrong"

STATUS_CODE_DEFAULTS: Dict[int, Tuple[str, str]] = {
    status.HTTP_400_BAD_REQUEST: ("VALIDATION_ERROR", "Validation failed"),
    status.HTTP_401_UNAUTHORIZED: ("UNAUTHORIZED", "Authentication required"),
    status.HTTP_403_FORBIDDEN: (
        "FORBIDDEN",
        "You do not have permission to perform this action",
    ),
    status.HTTP_404_NOT_FOUND: ("NOT_FOUND", "Resource not found"),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("METHOD_NOT_ALLOWED", "Method not allowed"),
    status.HTTP_409_CONFLICT: ("CONFLICT", "Resource conflict"),
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: (
        "UNSUPPORTED_MEDIA_TYPE",
        "Unsupported media type",
    ),
    status.HTTP_500_INTERNAL_SERVER_ERROR: ("SERVER_ERROR", SERVER_ERROR_MESSAGE),
    status.HTTP_503_SERVICE_UNAVAILABLE: (
        "SERVICE_UNAVAILABLE",
        "Service temporarily unavailable",
    ),
}


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """DRF ``EXCEPTION_HANDLER``: every failure leaves as the standard error envelope."""

    bound_logger = _bind_logger(context)

    if isinstance(exc, ProtectedError):
        return _from_protected_error(exc, bound_logger)

    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(_normalize_django_validation_error(exc))

    response = drf_exception_handler(exc, context)
    if response is not None:
        return _from_drf_exception(exc, response, bound_logger)

    bound_logger.exception("Unhandled exception bubbled to global handler")
    return error_response(
        "SERVER_ERROR",
        SERVER_ERROR_MESSAGE,
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view:
        log = log.bind(view=type(view).__name__)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
        user = getattr(request, "user", None)
        if getattr(user, "is_authenticated", False):
            log = log.bind(user_id=user.id)
    return log


def _from_protected_error(exc: ProtectedError, bound_logger) -> Response:
    # Raised when deleting rows that orders still point at
    referenced_by = sorted({type(obj).__name__ for obj in exc.protected_objects})
    bound_logger.info("Delete blocked by protected references", referenced_by=referenced_by)
    return error_response(
        "CONFLICT",
        "Resource is referenced by other records",
        {"referencedBy": referenced_by},
    )


def _from_drf_exception(exc: Exception, response: Response, bound_logger) -> Response:
    status_code = response.status_code
    code, message, details, hint = _normalize_payload(exc, response.data, status_code)
    headers = dict(response.headers) if getattr(response, "headers", None) else None
    if headers:
        headers.pop("Content-Type", None)

    if status_code >= 500:
        bound_logger.error("Converted server error", code=code, status=status_code)
    else:
        bound_logger.info("Converted API exception", code=code, status=status_code)

    return error_response(
        code,
        message,
        details,
        http_status=status_code,
        hint=hint,
        headers=headers,
    )


def _normalize_django_validation_error(
    exc: DjangoValidationError,
) -> Union[Dict[str, Any], list]:
    if hasattr(exc, "message_dict"):
        return exc.message_dict
    if hasattr(exc, "messages"):
        return list(exc.messages)
    return {"detail": getattr(exc, "message", "Validation failed")}


def _normalize_payload(
    exc: Exception,
    payload: Any,
    status_code: int,
) -> Tuple[str, str, Optional[Any], Optional[str]]:
    if isinstance(exc, ValidationError):
        return (
            "VALIDATION_ERROR",
            _extract_message(payload, "Validation failed", status_code),
            payload,
            None,
        )
    if isinstance(exc, ParseError):
        return (
            "VALIDATION_ERROR",
            _extract_message(payload, "Malformed request", status_code),
            payload,
            None,
        )
    if isinstance(exc, (NotAuthenticated, AuthenticationFailed)):
        message = _extract_message(
            payload,
            "Authentication failed"
            if isinstance(exc, AuthenticationFailed)
            else "Authentication required",
            status_code,
        )
        return ("UNAUTHORIZED", message, None, None)
    if isinstance(exc, (PermissionDenied, DjangoPermissionDenied)):
        return (
            "FORBIDDEN",
            _extract_message(
                payload, "You do not have permission to perform this action", status_code
            ),
            None,
            None,
        )
    if isinstance(exc, (NotFound, Http404)):
        return (
            "NOT_FOUND",
            _extract_message(payload, "Resource not found", status_code),
            None,
            None,
        )
    if isinstance(exc, MethodNotAllowed):
        return (
            "METHOD_NOT_ALLOWED",
            _extract_message(payload, "Method not allowed", status_code),
            None,
            None,
        )
    code, default_message = STATUS_CODE_DEFAULTS.get(
        status_code,
        (
            "SERVER_ERROR" if status_code >= 500 else "UNKNOWN_ERROR",
            SERVER_ERROR_MESSAGE if status_code >= 500 else "Request failed",
        ),
    )
    details = payload if _include_details(status_code, payload) else None
    message = _extract_message(payload, default_message, status_code)
    return code, message, details, None


def _include_details(status_code: int, payload: Any) -> bool:
    if status_code >= 500:
        return False
    return isinstance(payload, (dict, list)) and bool(payload)


def _extract_message(payload: Any, fallback: str, status_code: int) -> str:
    if status_code >= 500:
        return SERVER_ERROR_MESSAGE
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, str):
            return str(detail)
    if isinstance(payload, list) and payload and isinstance(payload[0], str):
        return str(payload[0])
    return fallback


__all__ = ["global_exception_handler"]
