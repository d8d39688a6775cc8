from .error_logging import ErrorHandlingMiddleware, register_exception_handlers
from .request_logging import RequestLoggingMiddleware

__all__ = ["ErrorHandlingMiddleware", "RequestLoggingMiddleware", "register_exception_handlers"]
