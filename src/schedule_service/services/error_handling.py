import logging
from functools import wraps
from typing import Callable, Any

from core.exceptions import ApplicationException

# Get logger without configuring (let uvicorn handle logging configuration)
logger = logging.getLogger(__name__)

class ServiceError(Exception):
    """Base exception for service errors."""
    def __init__(self, message: str, error_code: str = None, details: dict = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

def handle_service_errors(func: Callable) -> Callable:
    """Decorator to handle service errors consistently."""
    @wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        try:
            return func(*args, **kwargs)
        except (ServiceError, ApplicationException):
            # Re-raise service and data layer errors as-is
            raise
        except ValueError as e:
            logger.error(f"Validation error in {func.__name__}: {e}")
            raise ServiceError(f"Invalid input: {e}", "VALIDATION_ERROR") from e
        except Exception as e:
            logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
            raise ServiceError(f"Internal service error: {e}", "INTERNAL_ERROR") from e
    return wrapper
