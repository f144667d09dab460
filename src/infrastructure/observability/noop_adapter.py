"""
Infrastructure adapter: tracing disabled → IObservabilityHandler.
Used when Langfuse is not configured, and in tests.
"""

from typing import Any

from src.domain.ports.observability_port import IObservabilityHandler


class NoopObservabilityHandler(IObservabilityHandler):
    def callbacks(self) -> list[Any]:
        return []

    def flush(self) -> None:
        return None
