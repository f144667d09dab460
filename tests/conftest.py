import asyncio
from collections.abc import Callable
from typing import Any, Union

import pytest
from langchain_core.messages import AIMessage

from src.domain.entities.market_facts import QueryKind
from src.domain.ports.llm_port import ILanguageModel
from src.domain.ports.market_data_port import IMarketDataClient


class FakeMarketData(IMarketDataClient):
    """Serves canned payloads keyed by (QueryKind, ticker) and records every fetch."""

    def __init__(
        self,
        payloads: dict[tuple[QueryKind, str], dict[str, Any]] | None = None,
        errors: dict[tuple[QueryKind, str], Exception] | None = None,
        delays: dict[tuple[QueryKind, str], float] | None = None,
    ) -> None:
        self.payloads = payloads or {}
        self.errors = errors or {}
        self.delays = delays or {}
        self.calls: list[tuple[QueryKind, str]] = []

    async def fetch(self, kind: QueryKind, ticker: str) -> dict[str, Any]:
        self.calls.append((kind, ticker))
        delay = self.delays.get((kind, ticker))
        if delay:
            await asyncio.sleep(delay)
        if (kind, ticker) in self.errors:
            raise self.errors[(kind, ticker)]
        return self.payloads.get((kind, ticker), {})


Script = Union[list, Callable[[list], AIMessage]]


class ScriptedModel(ILanguageModel):
    """Completion engine stand-in: replays scripted AIMessages (or raises scripted errors)."""

    def __init__(self, script: Script) -> None:
        self._script = script if callable(script) else list(script)
        self.calls: list[list] = []
        self.bound_tools: list | None = None

    async def ainvoke(self, messages: list[Any]) -> Any:
        self.calls.append(list(messages))
        if callable(self._script):
            return self._script(messages)
        if not self._script:
            raise RuntimeError("script exhausted")
        step = self._script.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    def bind_tools(self, tools: list) -> "ScriptedModel":
        self.bound_tools = tools
        return self


def tool_call(name: str, args: dict, call_id: str) -> dict:
    return {"name": name, "args": args, "id": call_id, "type": "tool_call"}


@pytest.fixture
def fake_market_data() -> type[FakeMarketData]:
    return FakeMarketData


@pytest.fixture
def scripted_model() -> type[ScriptedModel]:
    return ScriptedModel


@pytest.fixture
def make_tool_call() -> Callable[[str, dict, str], dict]:
    return tool_call


def quote_payload(price: str = "189.8400", change: str = "1.2345%") -> dict[str, Any]:
    return {
        "Global Quote": {
            "01. symbol": "AAPL",
            "05. price": price,
            "10. change percent": change,
        }
    }


def news_payload(*articles: dict[str, Any]) -> dict[str, Any]:
    return {"items": str(len(articles)), "feed": list(articles)}


def overview_payload(**overrides: str) -> dict[str, Any]:
    payload = {
        "Symbol": "AAPL",
        "Name": "Apple Inc",
        "Sector": "TECHNOLOGY",
        "MarketCapitalization": "2950000000000",
        "PERatio": "29.5",
        "EPS": "6.43",
        "52WeekHigh": "199.62",
        "52WeekLow": "164.08",
        "DividendYield": "0.0052",
        "AnalystTargetPrice": "205.5",
    }
    payload.update(overrides)
    return payload


def earnings_payload(surprises: list[str]) -> dict[str, Any]:
    quarterly = [
        {
            "reportedDate": f"2025-{12 - i:02d}-15",
            "reportedEPS": f"1.{50 + i}",
            "estimatedEPS": "1.45",
            "surprise": "0.05",
            "surprisePercentage": surprise,
        }
        for i, surprise in enumerate(surprises)
    ]
    return {
        "symbol": "AAPL",
        "annualEarnings": [{"fiscalDateEnding": "2024-09-30", "reportedEPS": "6.08"}],
        "quarterlyEarnings": quarterly,
    }


@pytest.fixture
def payloads():
    class _Payloads:
        quote = staticmethod(quote_payload)
        news = staticmethod(news_payload)
        overview = staticmethod(overview_payload)
        earnings = staticmethod(earnings_payload)

    return _Payloads
