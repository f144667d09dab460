"""
Use-case: side-by-side price and news sentiment for two tickers.

Composes GetStockPrice and GetNewsSentiment: exactly four upstream fetches,
run concurrently. Results are laid out in a fixed order regardless of which
fetch finishes first, and a failure in one lookup only affects its own section.
"""

import asyncio

from src.application.services.fact_formatters import format_comparison
from src.application.use_cases.get_news_sentiment import GetNewsSentimentUseCase
from src.application.use_cases.get_stock_price import GetStockPriceUseCase
from src.application.use_cases.tool_output import as_tool_result


class CompareStocksUseCase:
    def __init__(
        self,
        price_uc: GetStockPriceUseCase,
        news_uc: GetNewsSentimentUseCase,
    ) -> None:
        self._price_uc = price_uc
        self._news_uc = news_uc

    async def execute(self, ticker1: str, ticker2: str) -> str:
        price_a, news_a, price_b, news_b = await asyncio.gather(
            as_tool_result(self._price_uc.execute(ticker1)),
            as_tool_result(self._news_uc.execute(ticker1)),
            as_tool_result(self._price_uc.execute(ticker2)),
            as_tool_result(self._news_uc.execute(ticker2)),
        )
        return format_comparison(price_a, news_a, price_b, news_b)
