from rest_framework import status as http_status
from rest_framework.response import Response
from rest_framework.views import exception_handler


def api_response(status_code, data=None):
    if data is None:
        data = []
    return Response(data, status=status_code)


def error_response(error):
    """Render a transactions.errors exception as ``{"error": message}``."""
    status_code = getattr(error, 'status_code', http_status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response({"error": error.message}, status=status_code)


def api_exception_handler(exc, context):
    """DRF's handler, reshaped so framework errors (bad JSON, 405) also answer ``{"error": ...}``."""
    response = exception_handler(exc, context)
    if response is not None and isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {"error": str(response.data['detail'])}
    return response
