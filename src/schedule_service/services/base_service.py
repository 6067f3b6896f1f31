"""
Base Service Class

Provides common functionality and patterns for all FastAPI services.
Includes logging, timing of operations and database session checks.
"""

import logging
import time
from typing import Optional, Dict, Any
from abc import ABC, abstractmethod
from sqlalchemy.orm import Session

from core.config import get_settings
from services.error_handling import ServiceError


class BaseService(ABC):
    """
    Base class for all service implementations.

    Provides:
    - Standardized logging
    - Slow operation detection
    - Database session management
    """

    def __init__(self, db: Optional[Session] = None, service_name: Optional[str] = None):
        """
        Initialize base service.

        Args:
            db: Optional database session
            service_name: Service name for logging (defaults to class name)
        """
        self.db = db
        self.service_name = service_name or self.__class__.__name__
        self.logger = logging.getLogger(self.service_name)
        self.slow_operation_ms = get_settings().slow_operation_ms

    # ========================================================================
    # Monitoring
    # ========================================================================

    def _record_call(self, operation: str, duration_ms: int, success: bool = True):
        """
        Log the outcome of a service call.

        Args:
            operation: Operation name
            duration_ms: Duration in milliseconds
            success: Whether operation succeeded
        """
        if not success:
            self.logger.warning(f"{operation} failed after {duration_ms}ms")
        elif duration_ms > self.slow_operation_ms:
            self.logger.warning(
                f"Slow operation detected: {operation} took {duration_ms}ms"
            )
        else:
            self.logger.debug(f"{operation} completed in {duration_ms}ms")

    def _timed_operation(self, operation_name: str):
        """
        Context manager for timing operations.

        Usage:
            with self._timed_operation("my_operation"):
                # operation code
                pass
        """
        return TimedOperation(self, operation_name)

    # ========================================================================
    # Database Helpers
    # ========================================================================

    def _ensure_db(self) -> Session:
        """
        Ensure database session is available.

        Returns:
            Database session

        Raises:
            ServiceError: If no database session available
        """
        if self.db is None:
            raise ServiceError(
                "Database session not available",
                error_code="NO_DB_SESSION"
            )
        return self.db

    # ========================================================================
    # Abstract Methods (to be implemented by subclasses)
    # ========================================================================

    @abstractmethod
    def health_check(self) -> Dict[str, Any]:
        """
        Perform health check for this service.

        Returns:
            Dictionary with health status and details

        Example:
            {
                "status": "healthy",
                "details": {
                    "event_count": 3
                }
            }
        """
        pass


class TimedOperation:
    """Context manager for timing operations"""

    def __init__(self, service: BaseService, operation_name: str):
        self.service = service
        self.operation_name = operation_name
        self.start_time = None
        self.success = True

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = int((time.time() - self.start_time) * 1000)
        self.success = exc_type is None

        self.service._record_call(
            self.operation_name,
            duration_ms,
            success=self.success
        )

        return False  # Don't suppress exceptions
