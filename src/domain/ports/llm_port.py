"""
Port (interface) for the chat completion engine.
Infrastructure adapters (e.g. BedrockChatAdapter) must implement this interface.

The engine receives the full transcript and answers with either a final
assistant message or a message carrying one or more tool-call requests.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILanguageModel(ABC):
    @abstractmethod
    async def ainvoke(self, messages: list[Any]) -> Any:
        """Submit the transcript and return the engine's next assistant message."""
        ...

    @abstractmethod
    def bind_tools(self, tools: list) -> "ILanguageModel":
        """Return a new model instance with the given tools declared for function-calling."""
        ...
