import logging

logger = logging.getLogger('transactions.requests')


class RequestLoggingMiddleware:
    """Logs method, path and body of every incoming request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        logger.info(
            "Transaction service received request: %s %s",
            request.method,
            request.get_full_path(),
        )
        if request.body:
            logger.info("Request body: %s", request.body.decode('utf-8', errors='replace'))

        response = self.get_response(request)

        logger.info(
            "%s %s -> %s",
            request.method,
            request.get_full_path(),
            response.status_code,
        )
        return response
