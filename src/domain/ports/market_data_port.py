"""
Port (interface) for upstream market-data clients.
Infrastructure adapters (e.g. AlphaVantageClient) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any

from src.domain.entities.market_facts import QueryKind


class IMarketDataClient(ABC):
    @abstractmethod
    async def fetch(self, kind: QueryKind, ticker: str) -> dict[str, Any]:
        """Perform exactly one upstream request and return the decoded JSON object.

        No retries and no caching: every call is billed against the provider's
        rate limit.

        Raises:
            DataUnavailable: on timeout, transport error, non-2xx status,
                             a body that is not a JSON object, or throttling.
        """
        ...
