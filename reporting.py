import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class ErrorReporter(ABC):
    """Capability views use to surface failures."""

    @abstractmethod
    def report(self, context: str, error: Exception) -> None:
        ...


class LoggingErrorReporter(ErrorReporter):
    """Writes one error line per failure to the application log."""

    def report(self, context: str, error: Exception) -> None:
        logger.error(f"{context}: {error}")
