"""API middleware."""

from gestpro.api.middleware.error_handler import ErrorHandlerMiddleware
from gestpro.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
