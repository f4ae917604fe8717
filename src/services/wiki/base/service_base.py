"""
Base service class for wiki services.
Provides common logging and error handling.
"""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class BaseService(ABC):
    """
    Base class for all wiki services.
    Provides a shared logger and uniform error reporting.
    """

    def __init__(self):
        self.logger = logger

    @abstractmethod
    def get_service_name(self) -> str:
        """
        Get the service name for logging.

        Returns:
            str: The service name
        """
        pass

    def _log_info(self, message: str):
        self.logger.info(f"[{self.get_service_name()}] {message}")

    def _handle_service_error(self, error: Exception, context: str = ""):
        """
        Handle service errors with proper logging.

        Args:
            error: The exception that occurred
            context: Context information about the error
        """
        error_msg = f"[{self.get_service_name()}] {context}: {str(error)}"
        self.logger.error(error_msg)

        # Re-raise the error for upstream handling
        raise error
