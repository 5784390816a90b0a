"""Observer hooks the show directory reports operations to."""

import logging
from typing import Any, Protocol

from marquee.schemas.show import ShowDetail

logger = logging.getLogger(__name__)


class DirectoryObserver(Protocol):
    """Receives operation entry, result and error events."""

    def on_entry(self, operation: str, params: dict[str, Any]) -> None: ...

    def on_result(self, operation: str, result: Any) -> None: ...

    def on_error(self, operation: str, error: Exception) -> None: ...


def summarise_result(result: Any) -> str:
    """Short description of an operation result for log lines."""
    if isinstance(result, list):
        return f"{len(result)} rows"
    if isinstance(result, ShowDetail):
        return f"show {result.id}"
    return type(result).__name__


class LoggingObserver:
    """Default observer writing through the standard logging module."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def on_entry(self, operation: str, params: dict[str, Any]) -> None:
        self.log.debug(f"{operation} called with {params}")

    def on_result(self, operation: str, result: Any) -> None:
        self.log.info(f"{operation} returned {summarise_result(result)}")

    def on_error(self, operation: str, error: Exception) -> None:
        # Store failures are the operator's problem; the rest are caller errors
        if getattr(error, "status_code", 500) >= 500:
            self.log.error(f"{operation} failed: {error}")
        else:
            self.log.info(f"{operation} rejected: {error}")


class NullObserver:
    """Observer that discards every event."""

    def on_entry(self, operation: str, params: dict[str, Any]) -> None:
        pass

    def on_result(self, operation: str, result: Any) -> None:
        pass

    def on_error(self, operation: str, error: Exception) -> None:
        pass
