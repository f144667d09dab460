"""
Ticker symbol normalisation.
Tickers are case-insensitive; every value past the tool boundary is upper-case.
"""

from src.domain.errors import InvalidRequest


def normalize_ticker(raw: str) -> str:
    """Return *raw* stripped and upper-cased.

    Raises:
        InvalidRequest: if *raw* is blank or not a string.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidRequest("ticker must be a non-empty string")
    return raw.strip().upper()
