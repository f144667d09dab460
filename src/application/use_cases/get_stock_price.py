"""
Use-case: current stock price for a ticker.
Depends only on Domain ports and entities — no infrastructure imports.
"""

from src.application.services.fact_extractors import extract_quote
from src.application.services.fact_formatters import format_quote
from src.domain.entities.market_facts import QueryKind
from src.domain.entities.ticker import normalize_ticker
from src.domain.ports.market_data_port import IMarketDataClient
from src.shared.logger import log_context


class GetStockPriceUseCase:
    def __init__(self, market_data: IMarketDataClient) -> None:
        self._market_data = market_data

    async def execute(self, ticker: str) -> str:
        """Fetch, extract and format the quote for *ticker* (case-insensitive).

        Raises:
            InvalidRequest:  if *ticker* is blank.
            MissingData:     if the provider has no quote for the ticker.
            DataUnavailable: on provider failure or an unreadable price.
        """
        symbol = normalize_ticker(ticker)
        with log_context(ticker=symbol):
            payload = await self._market_data.fetch(QueryKind.QUOTE, symbol)
            return format_quote(extract_quote(payload, symbol))
