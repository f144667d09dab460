"""
Use-case: percentage return between two prices. Pure arithmetic, no network call.
"""

from decimal import Decimal, InvalidOperation
from typing import Union

from src.application.services.fact_formatters import format_return
from src.domain.errors import InvalidRequest

Number = Union[int, float, str, Decimal]


def _to_decimal(value: Number, name: str) -> Decimal:
    if isinstance(value, bool):
        raise InvalidRequest(f"{name} must be a number, got {value!r}")
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidRequest(f"{name} must be a number, got {value!r}") from exc
    if not parsed.is_finite():
        raise InvalidRequest(f"{name} must be a finite number, got {value!r}")
    return parsed


class CalculateReturnUseCase:
    def execute(self, start_price: Number, end_price: Number) -> str:
        """Return "Return: X.XX% (gain|loss)"; zero counts as a gain.

        Raises:
            InvalidRequest: if either price is non-numeric or *start_price* is zero.
        """
        start = _to_decimal(start_price, "start_price")
        end = _to_decimal(end_price, "end_price")
        if start.is_zero():
            raise InvalidRequest("start_price must be non-zero")
        return format_return((end - start) / start * 100)
