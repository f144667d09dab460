"""
Infrastructure adapter: Alpha Vantage REST API → IMarketDataClient.
All Alpha Vantage query-building and HTTP details are confined here;
the rest of the codebase depends only on IMarketDataClient.

The httpx.AsyncClient is injected so one connection pool is shared by every
session; the caller owns its lifecycle.
"""

import logging
from typing import Any

import httpx

from src.domain.entities.market_facts import QueryKind
from src.domain.errors import DataUnavailable
from src.domain.ports.market_data_port import IMarketDataClient
from src.shared.logger import get_logger, log_event

logger = get_logger(__name__)

# Alpha Vantage signals throttling with HTTP 200 and one of these keys.
# "Information" also carries invalid-input notices, so the wording decides.
_THROTTLE_KEYS = ("Note", "Information")
_THROTTLE_PHRASES = ("rate limit", "call frequency", "requests per day")


def is_throttle_notice(payload: dict[str, Any]) -> bool:
    if len(payload) != 1:
        return False
    for key in _THROTTLE_KEYS:
        notice = payload.get(key)
        if isinstance(notice, str) and any(
            phrase in notice.lower() for phrase in _THROTTLE_PHRASES
        ):
            return True
    return False


class AlphaVantageClient(IMarketDataClient):
    """Fetches raw quote, overview, earnings and news-sentiment documents."""

    BASE_URL = "https://www.alphavantage.co/query"
    NEWS_LIMIT = 5

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: str,
        base_url: str = BASE_URL,
        timeout: float = 10.0,
    ) -> None:
        self._http = http_client
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout

    def build_params(self, kind: QueryKind, ticker: str) -> dict[str, Any]:
        params: dict[str, Any] = {"function": kind.value, "apikey": self._api_key}
        if kind is QueryKind.NEWS_SENTIMENT:
            params["tickers"] = ticker
            params["limit"] = self.NEWS_LIMIT
        else:
            params["symbol"] = ticker
        return params

    async def fetch(self, kind: QueryKind, ticker: str) -> dict[str, Any]:
        log_event(
            logger,
            event="market_data.request",
            message=f"Fetching {kind.value} for {ticker}",
            fields={"function": kind.value, "ticker": ticker},
        )
        try:
            response = await self._http.get(
                self._base_url,
                params=self.build_params(kind, ticker),
                timeout=self._timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise DataUnavailable(
                f"Market data request for {ticker} timed out after {self._timeout:g}s"
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise DataUnavailable(
                f"Market data provider returned HTTP {exc.response.status_code} for {ticker}"
            ) from exc
        except httpx.HTTPError as exc:
            raise DataUnavailable(
                f"Market data request for {ticker} failed: {exc.__class__.__name__}"
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise DataUnavailable(
                f"Market data provider returned a malformed response for {ticker}"
            ) from exc
        if not isinstance(payload, dict):
            raise DataUnavailable(
                f"Market data provider returned a malformed response for {ticker}"
            )

        if is_throttle_notice(payload):
            log_event(
                logger,
                event="market_data.throttled",
                message=f"Alpha Vantage notice: {next(iter(payload.values()))}",
                level=logging.WARNING,
                fields={"function": kind.value, "ticker": ticker},
            )
            raise DataUnavailable(
                f"Market data provider rate limit reached while fetching {ticker}"
            )
        return payload
