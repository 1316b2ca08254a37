"""HTTP middleware for Case Registry."""

from case_registry.api.middleware.logging_middleware import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
