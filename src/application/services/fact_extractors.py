"""
Application service: project raw provider documents into typed market facts.
Depends only on Domain entities and errors — no infrastructure imports.

Policy, applied to every data kind:
  - A missing structural key raises MissingData ("No … data found for {ticker}").
  - A scalar that fails to parse becomes None (unknown), except the quote
    price, which raises MalformedData.
Tickers passed in are already normalised.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from src.domain.entities.market_facts import EarningsRecord, Fundamentals, NewsItem, Quote
from src.domain.errors import MalformedData, MissingData

MAX_EARNINGS_QUARTERS = 4
MAX_NEWS_ITEMS = 5


def parse_decimal(value: Any) -> Optional[Decimal]:
    """Parse a provider scalar as a finite Decimal, or return None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return parsed if parsed.is_finite() else None


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def extract_quote(payload: dict[str, Any], ticker: str) -> Quote:
    quote = payload.get("Global Quote")
    if not isinstance(quote, dict) or not quote:
        raise MissingData(f"No quote data found for {ticker}")

    price = parse_decimal(quote.get("05. price"))
    if price is None or price < 0:
        raise MalformedData(
            f"Quote for {ticker} has an unreadable price: {quote.get('05. price')!r}"
        )
    return Quote(
        ticker=ticker,
        price=price,
        change_percent=_text(quote.get("10. change percent")) or "N/A",
    )


def extract_fundamentals(payload: dict[str, Any], ticker: str) -> Fundamentals:
    if "Symbol" not in payload:
        raise MissingData(f"No fundamental data found for {ticker}")

    return Fundamentals(
        ticker=ticker,
        name=_text(payload.get("Name")),
        sector=_text(payload.get("Sector")),
        market_cap=parse_decimal(payload.get("MarketCapitalization")),
        pe_ratio=_text(payload.get("PERatio")),
        eps=_text(payload.get("EPS")),
        week52_low=_text(payload.get("52WeekLow")),
        week52_high=_text(payload.get("52WeekHigh")),
        dividend_yield=parse_decimal(payload.get("DividendYield")),
        analyst_target=_text(payload.get("AnalystTargetPrice")),
    )


def extract_earnings(payload: dict[str, Any], ticker: str) -> list[EarningsRecord]:
    """Return the most recent quarters, in provider order (most recent first)."""
    if "annualEarnings" not in payload:
        raise MissingData(f"No earnings data found for {ticker}")

    quarterly = payload.get("quarterlyEarnings")
    if not isinstance(quarterly, list) or not quarterly:
        raise MissingData(f"No quarterly earnings data found for {ticker}")

    records = []
    for entry in quarterly[:MAX_EARNINGS_QUARTERS]:
        if not isinstance(entry, dict):
            continue
        records.append(
            EarningsRecord(
                reported_date=_text(entry.get("reportedDate")) or "Unknown date",
                estimated_eps=_text(entry.get("estimatedEPS")),
                actual_eps=_text(entry.get("reportedEPS")),
                surprise_percent=parse_decimal(entry.get("surprisePercentage")),
            )
        )
    return records


def _ticker_sentiment_label(article: dict[str, Any], ticker: str) -> Optional[str]:
    for entry in article.get("ticker_sentiment") or []:
        if not isinstance(entry, dict):
            continue
        symbol = entry.get("ticker")
        if isinstance(symbol, str) and symbol.strip().upper() == ticker:
            return _text(entry.get("ticker_sentiment_label"))
    return None


def extract_news(payload: dict[str, Any], ticker: str) -> list[NewsItem]:
    """Return up to MAX_NEWS_ITEMS articles; an empty list means no recent news."""
    feed = payload.get("feed")
    if not isinstance(feed, list):
        raise MissingData(f"No news sentiment data found for {ticker}")

    items = []
    for article in feed[:MAX_NEWS_ITEMS]:
        if not isinstance(article, dict):
            continue
        label = _ticker_sentiment_label(article, ticker) or _text(
            article.get("overall_sentiment_label")
        )
        items.append(
            NewsItem(
                title=_text(article.get("title")) or "(untitled)",
                sentiment_label=label or "N/A",
            )
        )
    return items
