"""
Infrastructure adapter: Langfuse → IObservabilityHandler.

Langfuse is imported lazily so the module can be loaded even when LANGFUSE_*
environment variables are not set (e.g. during testing). The composition root
only builds this handler when Langfuse is configured.
"""

from typing import Any

from src.domain.ports.observability_port import IObservabilityHandler


class LangfuseObservabilityHandler(IObservabilityHandler):
    """Wraps the Langfuse LangChain CallbackHandler."""

    def __init__(self) -> None:
        from langfuse.langchain import CallbackHandler
        self._handler = CallbackHandler()

    def callbacks(self) -> list[Any]:
        return [self._handler]

    def flush(self) -> None:
        """Flush pending traces to the Langfuse backend before the process exits."""
        from langfuse import get_client
        get_client().flush()
