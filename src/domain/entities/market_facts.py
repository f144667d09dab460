"""
Domain entities for the market facts the agent cites.
Zero external dependencies — pure Python dataclasses only.

Unknown values are represented as None; formatters decide how to render them.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class QueryKind(Enum):
    """Upstream query types, valued by the provider's `function` name."""

    QUOTE = "GLOBAL_QUOTE"
    OVERVIEW = "OVERVIEW"
    EARNINGS = "EARNINGS"
    NEWS_SENTIMENT = "NEWS_SENTIMENT"


class BeatStatus(Enum):
    BEAT = "Beat"
    MISSED = "Missed"
    MET = "Met"


@dataclass(frozen=True)
class Quote:
    ticker: str
    price: Decimal
    change_percent: str


@dataclass(frozen=True)
class Fundamentals:
    ticker: str
    name: Optional[str]
    sector: Optional[str]
    market_cap: Optional[Decimal]
    pe_ratio: Optional[str]
    eps: Optional[str]
    week52_low: Optional[str]
    week52_high: Optional[str]
    dividend_yield: Optional[Decimal]
    analyst_target: Optional[str]


@dataclass(frozen=True)
class EarningsRecord:
    reported_date: str
    estimated_eps: Optional[str]
    actual_eps: Optional[str]
    surprise_percent: Optional[Decimal]

    @property
    def beat_status(self) -> Optional[BeatStatus]:
        if self.surprise_percent is None:
            return None
        if self.surprise_percent > 0:
            return BeatStatus.BEAT
        if self.surprise_percent < 0:
            return BeatStatus.MISSED
        return BeatStatus.MET


@dataclass(frozen=True)
class NewsItem:
    title: str
    sentiment_label: str
