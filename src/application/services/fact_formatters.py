"""
Application service: render typed market facts into the strings the agent cites.
Pure functions, no I/O. Decimals are rounded half-up.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from src.domain.entities.market_facts import EarningsRecord, Fundamentals, NewsItem, Quote

_BILLION = Decimal(1_000_000_000)
_HUNDRED = Decimal(100)


def _rounded(value: Decimal, places: int) -> Decimal:
    # quantize needs enough precision to hold every integer digit of the value.
    with localcontext() as ctx:
        ctx.prec = max(28, value.adjusted() + places + 2)
        rounded = value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    return abs(rounded) if rounded.is_zero() else rounded


def _fixed(value: Decimal, places: int) -> str:
    return f"{_rounded(value, places):.{places}f}"


def _dollars(value: Optional[str]) -> str:
    return f"${value}" if value is not None else "N/A"


def format_quote(quote: Quote) -> str:
    return f"{quote.ticker} is trading at ${_fixed(quote.price, 2)} ({quote.change_percent} today)"


def format_return(return_percent: Decimal) -> str:
    rounded = _rounded(return_percent, 2)
    label = "gain" if rounded >= 0 else "loss"
    return f"Return: {rounded:.2f}% ({label})"


def format_news(ticker: str, items: list[NewsItem]) -> str:
    if not items:
        return f"No recent news found for {ticker}"
    lines = [f"- {item.title} [{item.sentiment_label}]" for item in items]
    return f"{ticker} recent news sentiment:\n" + "\n".join(lines)


def format_fundamentals(facts: Fundamentals) -> str:
    market_cap = (
        f"${_fixed(facts.market_cap / _BILLION, 1)}B"
        if facts.market_cap is not None
        else "N/A"
    )
    dividend = (
        f"{_fixed(facts.dividend_yield * _HUNDRED, 2)}%"
        if facts.dividend_yield is not None
        else "None"
    )
    lines = [
        f"{facts.name or 'N/A'} ({facts.ticker}) — {facts.sector or 'N/A'}",
        f"Market Cap: {market_cap}",
        f"P/E Ratio: {facts.pe_ratio or 'N/A'}",
        f"EPS: {_dollars(facts.eps)}",
        f"52-Week Range: {_dollars(facts.week52_low)} — {_dollars(facts.week52_high)}",
        f"Dividend Yield: {dividend}",
        f"Analyst Target Price: {_dollars(facts.analyst_target)}",
    ]
    return "\n".join(lines)


def format_earnings_record(record: EarningsRecord) -> str:
    head = (
        f"- {record.reported_date}: Actual EPS {_dollars(record.actual_eps)}"
        f" vs Est {_dollars(record.estimated_eps)}"
    )
    status = record.beat_status
    if status is None:
        return f"{head} — surprise N/A"
    return f"{head} — {status.value} by {_fixed(abs(record.surprise_percent), 2)}%"


def format_earnings(ticker: str, records: list[EarningsRecord]) -> str:
    lines = [format_earnings_record(record) for record in records]
    return f"{ticker} Earnings History (Last 4 Quarters):\n" + "\n".join(lines)


def format_comparison(
    price_a: str, news_a: str, price_b: str, news_b: str
) -> str:
    return f"Comparison:\n{price_a}\n{news_a}\n\n{price_b}\n{news_b}"
