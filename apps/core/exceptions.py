"""
API error mapping.

Every error leaves the API as JSON with a ``detail`` key (validation errors
keep DRF's per-field shape). Unexpected exceptions are logged with their
traceback and surfaced as a generic 500 without internal details.
"""

import logging

from django.db.models import ProtectedError

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.orders.exceptions import OrderError

logger = logging.getLogger(__name__)


class Conflict(APIException):
    """The request conflicts with the current state of a resource."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "The request conflicts with the current state of the resource."
    default_code = "conflict"


def api_exception_handler(exc, context):
    """
    Project-wide DRF exception handler.

    Args:
        exc: The raised exception
        context: DRF context dict (contains the view and request)

    Returns:
        Response with the mapped status code and a JSON body
    """
    if isinstance(exc, ProtectedError):
        exc = Conflict(_protected_error_detail(exc))

    if isinstance(exc, OrderError):
        return Response({"detail": exc.message}, status=status.HTTP_400_BAD_REQUEST)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.error(
        "Unhandled error in %s",
        view.__class__.__name__ if view is not None else "unknown view",
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return Response(
        {"detail": "Internal server error."},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _protected_error_detail(exc):
    protected = list(exc.protected_objects)
    if not protected:
        return "This item is still referenced and cannot be deleted."
    label = str(protected[0]._meta.verbose_name_plural).lower()
    return f"This item is still in use by {len(protected)} {label} and cannot be deleted."
