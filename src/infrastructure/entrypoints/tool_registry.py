"""
LangChain @tool wrappers — Infrastructure entrypoint / Composition Root.

The @tool decorator is a LangChain/LangGraph infrastructure concern and must
NOT appear in the application or domain layers. This module binds each
application use-case to a named tool callable that can be passed to
build_agent_graph(). The tool set is fixed: it is built once at startup and
never changes for the life of the process.
"""

from langchain_core.tools import BaseTool, tool
from langchain_core.utils.function_calling import convert_to_openai_tool

from src.application.use_cases.calculate_return import CalculateReturnUseCase
from src.application.use_cases.compare_stocks import CompareStocksUseCase
from src.application.use_cases.get_earnings import GetEarningsUseCase
from src.application.use_cases.get_fundamentals import GetFundamentalsUseCase
from src.application.use_cases.get_news_sentiment import GetNewsSentimentUseCase
from src.application.use_cases.get_stock_price import GetStockPriceUseCase
from src.application.use_cases.tool_output import as_tool_result
from src.domain.entities.tool_descriptor import ToolDescriptor
from src.domain.ports.market_data_port import IMarketDataClient


def create_tools(market_data: IMarketDataClient) -> list[BaseTool]:
    """Build and return the six LangChain tools with injected use-case dependencies.

    Args:
        market_data: IMarketDataClient implementation (e.g. AlphaVantageClient).

    Returns:
        List of six @tool callables ready to be passed to build_agent_graph().
    """
    price_uc = GetStockPriceUseCase(market_data)
    news_uc = GetNewsSentimentUseCase(market_data)
    fundamentals_uc = GetFundamentalsUseCase(market_data)
    earnings_uc = GetEarningsUseCase(market_data)
    return_uc = CalculateReturnUseCase()
    compare_uc = CompareStocksUseCase(price_uc, news_uc)

    @tool("GetStockPrice")
    async def get_stock_price(ticker: str) -> str:
        """Gets the current stock price for a given ticker symbol.

        Args:
            ticker: The stock ticker symbol, e.g. AAPL, MSFT, NVDA.
        """
        return await as_tool_result(price_uc.execute(ticker))

    @tool("CalculateReturn")
    async def calculate_return(start_price: float, end_price: float) -> str:
        """Calculates the percentage return between two prices.

        Args:
            start_price: The starting price.
            end_price:   The ending price.
        """

        async def _compute() -> str:
            return return_uc.execute(start_price, end_price)

        return await as_tool_result(_compute())

    @tool("GetNewsSentiment")
    async def get_news_sentiment(ticker: str) -> str:
        """Gets a summary of recent news sentiment for a stock.

        Args:
            ticker: The stock ticker symbol, e.g. AAPL, MSFT, NVDA.
        """
        return await as_tool_result(news_uc.execute(ticker))

    @tool("CompareStocks")
    async def compare_stocks(ticker1: str, ticker2: str) -> str:
        """Compares two stocks across price and sentiment.

        Args:
            ticker1: First stock ticker.
            ticker2: Second stock ticker.
        """
        return await compare_uc.execute(ticker1, ticker2)

    @tool("GetFundamentals")
    async def get_fundamentals(ticker: str) -> str:
        """Gets fundamental data for a stock including P/E ratio, EPS, market cap,
        52-week range, analyst target price and dividend yield. Use this to assess
        valuation and whether a stock may be overvalued or undervalued.

        Args:
            ticker: The stock ticker symbol, e.g. AAPL, MSFT, NVDA.
        """
        return await as_tool_result(fundamentals_uc.execute(ticker))

    @tool("GetEarnings")
    async def get_earnings(ticker: str) -> str:
        """Gets historical earnings data for the last four reported quarters,
        including report dates, actual vs estimated EPS and surprise percentages.

        Args:
            ticker: The stock ticker symbol, e.g. AAPL, MSFT, NVDA.
        """
        return await as_tool_result(earnings_uc.execute(ticker))

    return [
        get_stock_price,
        calculate_return,
        get_news_sentiment,
        compare_stocks,
        get_fundamentals,
        get_earnings,
    ]


def tool_descriptors(tools: list[BaseTool]) -> list[ToolDescriptor]:
    """Describe each tool by name, description and JSON parameter schema."""
    return [
        ToolDescriptor(
            name=t.name,
            description=t.description,
            parameters=convert_to_openai_tool(t)["function"]["parameters"],
        )
        for t in tools
    ]
