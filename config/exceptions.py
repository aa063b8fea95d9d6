"""
API-wide exception handler.

Every error leaving the API has the shape ``{"error": "<message>"}``.
Validation errors additionally carry the per-field messages under
``"details"``. Database failures that escape a view become a 500 with the
underlying message instead of an HTML error page.
"""
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler


logger = logging.getLogger(__name__)


def _first_message(data):
    """Return the first human readable message from DRF error data."""
    if isinstance(data, dict):
        for value in data.values():
            return _first_message(value)
        return 'Invalid input.'
    if isinstance(data, list):
        return _first_message(data[0]) if data else 'Invalid input.'
    return str(data)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        if isinstance(exc, DatabaseError):
            logger.exception("Unhandled database error in %s", context.get('view'))
            return Response(
                {'error': str(exc) or 'Database error'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        return None

    data = response.data
    if isinstance(exc, ValidationError):
        response.data = {
            'error': _first_message(data),
            'details': data,
        }
    elif isinstance(data, dict) and 'detail' in data:
        response.data = {'error': str(data['detail'])}
    else:
        response.data = {'error': _first_message(data)}

    return response
