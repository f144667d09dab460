"""
Port (interface) for observability / tracing handlers.
Infrastructure adapters (e.g. LangfuseObservabilityHandler) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any


class IObservabilityHandler(ABC):
    @abstractmethod
    def callbacks(self) -> list[Any]:
        """Return the framework-native callbacks to attach to a graph run (may be empty)."""
        ...

    @abstractmethod
    def flush(self) -> None:
        """Flush any buffered telemetry data to the remote backend."""
        ...
