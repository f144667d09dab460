"""
Use-case: recent news headlines with their sentiment labels for a ticker.
Depends only on Domain ports and entities — no infrastructure imports.
"""

from src.application.services.fact_extractors import extract_news
from src.application.services.fact_formatters import format_news
from src.domain.entities.market_facts import QueryKind
from src.domain.entities.ticker import normalize_ticker
from src.domain.ports.market_data_port import IMarketDataClient
from src.shared.logger import log_context


class GetNewsSentimentUseCase:
    def __init__(self, market_data: IMarketDataClient) -> None:
        self._market_data = market_data

    async def execute(self, ticker: str) -> str:
        """Return up to five headlines, or a "No recent news" message for an empty feed."""
        symbol = normalize_ticker(ticker)
        with log_context(ticker=symbol):
            payload = await self._market_data.fetch(QueryKind.NEWS_SENTIMENT, symbol)
            return format_news(symbol, extract_news(payload, symbol))
