"""
Use-case: the last four reported quarters of earnings for a ticker.
Depends only on Domain ports and entities — no infrastructure imports.
"""

from src.application.services.fact_extractors import extract_earnings
from src.application.services.fact_formatters import format_earnings
from src.domain.entities.market_facts import QueryKind
from src.domain.entities.ticker import normalize_ticker
from src.domain.ports.market_data_port import IMarketDataClient
from src.shared.logger import log_context


class GetEarningsUseCase:
    def __init__(self, market_data: IMarketDataClient) -> None:
        self._market_data = market_data

    async def execute(self, ticker: str) -> str:
        symbol = normalize_ticker(ticker)
        with log_context(ticker=symbol):
            payload = await self._market_data.fetch(QueryKind.EARNINGS, symbol)
            return format_earnings(symbol, extract_earnings(payload, symbol))
