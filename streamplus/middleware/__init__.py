from .errors import ErrorHandlingMiddleware
from .performance import ResponseHeadersMiddleware, TimingMiddleware

__all__ = ["ErrorHandlingMiddleware", "ResponseHeadersMiddleware", "TimingMiddleware"]
