from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

D = Decimal

ZERO = D("0")
_CENT = D("0.01")
MONTHS_PER_YEAR = D("12")


def to_decimal(value: Decimal | int | float | str | None) -> D:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    # str() first so floats keep their printed value instead of the binary one
    return D(str(value))


def round_cents(value: D) -> D:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def sum_decimals(values: Iterable[D]) -> D:
    return sum(values, ZERO)


__all__ = [
    "D",
    "MONTHS_PER_YEAR",
    "ZERO",
    "round_cents",
    "sum_decimals",
    "to_decimal",
]
