"""
Use-case: company overview and valuation metrics for a ticker.
Depends only on Domain ports and entities — no infrastructure imports.
"""

from src.application.services.fact_extractors import extract_fundamentals
from src.application.services.fact_formatters import format_fundamentals
from src.domain.entities.market_facts import QueryKind
from src.domain.entities.ticker import normalize_ticker
from src.domain.ports.market_data_port import IMarketDataClient
from src.shared.logger import log_context


class GetFundamentalsUseCase:
    def __init__(self, market_data: IMarketDataClient) -> None:
        self._market_data = market_data

    async def execute(self, ticker: str) -> str:
        """Render the fundamentals block; unknown fields show as N/A.

        Raises:
            MissingData:     if the overview has no "Symbol" field.
            DataUnavailable: on provider failure.
        """
        symbol = normalize_ticker(ticker)
        with log_context(ticker=symbol):
            payload = await self._market_data.fetch(QueryKind.OVERVIEW, symbol)
            return format_fundamentals(extract_fundamentals(payload, symbol))
