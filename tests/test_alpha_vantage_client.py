import httpx
import pytest

from src.application.use_cases.get_news_sentiment import GetNewsSentimentUseCase
from src.domain.entities.market_facts import QueryKind
from src.domain.errors import DataUnavailable, MissingData
from src.infrastructure.market_data.alpha_vantage_client import AlphaVantageClient


def _client(handler) -> AlphaVantageClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AlphaVantageClient(http, api_key="demo-key", timeout=2.0)


@pytest.mark.asyncio
async def test_fetch_quote_builds_symbol_query() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"Global Quote": {"05. price": "10.00"}})

    payload = await _client(handler).fetch(QueryKind.QUOTE, "AAPL")

    assert payload == {"Global Quote": {"05. price": "10.00"}}
    params = dict(seen[0].url.params)
    assert params == {"function": "GLOBAL_QUOTE", "symbol": "AAPL", "apikey": "demo-key"}
    assert str(seen[0].url).startswith("https://www.alphavantage.co/query")


@pytest.mark.asyncio
async def test_fetch_news_uses_tickers_and_limit() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"feed": []})

    await _client(handler).fetch(QueryKind.NEWS_SENTIMENT, "NVDA")

    params = dict(seen[0].url.params)
    assert params["function"] == "NEWS_SENTIMENT"
    assert params["tickers"] == "NVDA"
    assert params["limit"] == "5"
    assert "symbol" not in params


@pytest.mark.asyncio
async def test_fetch_passes_error_message_bodies_through() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"Error Message": "Invalid API call."})

    payload = await _client(handler).fetch(QueryKind.OVERVIEW, "ZZZZ")

    assert payload == {"Error Message": "Invalid API call."}


@pytest.mark.asyncio
async def test_non_2xx_is_data_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="Service Unavailable")

    with pytest.raises(DataUnavailable, match="HTTP 503"):
        await _client(handler).fetch(QueryKind.OVERVIEW, "AAPL")


@pytest.mark.asyncio
async def test_timeout_is_data_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("read timed out", request=request)

    with pytest.raises(DataUnavailable, match="timed out"):
        await _client(handler).fetch(QueryKind.EARNINGS, "AAPL")


@pytest.mark.asyncio
async def test_connection_error_is_data_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(DataUnavailable, match="ConnectError"):
        await _client(handler).fetch(QueryKind.QUOTE, "AAPL")


@pytest.mark.asyncio
@pytest.mark.parametrize("body", ["<html>oops</html>", "[1, 2, 3]"])
async def test_malformed_body_is_data_unavailable(body) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text=body)

    with pytest.raises(DataUnavailable, match="malformed"):
        await _client(handler).fetch(QueryKind.QUOTE, "AAPL")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "key, notice",
    [
        ("Note", "Thank you for using Alpha Vantage! Our standard API call frequency is 5 calls per minute."),
        ("Information", "Our standard API rate limit is 25 requests per day."),
    ],
)
async def test_throttle_notice_is_data_unavailable(key, notice) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={key: notice})

    with pytest.raises(DataUnavailable, match="rate limit"):
        await _client(handler).fetch(QueryKind.QUOTE, "AAPL")


_INVALID_INPUTS = {
    "Information": "Invalid inputs. Please refer to the API documentation "
    "https://www.alphavantage.co/documentation#newsapi and try again."
}


@pytest.mark.asyncio
async def test_information_without_throttle_wording_passes_through() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_INVALID_INPUTS)

    payload = await _client(handler).fetch(QueryKind.NEWS_SENTIMENT, "ZZZZ")

    assert payload == _INVALID_INPUTS


@pytest.mark.asyncio
async def test_invalid_inputs_notice_surfaces_as_missing_news() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_INVALID_INPUTS)

    use_case = GetNewsSentimentUseCase(_client(handler))

    with pytest.raises(MissingData, match="No news sentiment data found for ZZZZ"):
        await use_case.execute("zzzz")
