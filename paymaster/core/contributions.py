from __future__ import annotations

from decimal import Decimal

from paymaster.core.money import MONTHS_PER_YEAR, ZERO

D = Decimal


def clamp(value: D, floor: D | None, ceiling: D | None) -> D:
    if floor is not None and value < floor:
        return floor
    if ceiling is not None and value > ceiling:
        return ceiling
    return value


def capped_contribution(
    gross_salary: D,
    rate: D,
    max_ceiling: D | None,
    min_ceiling: D | None = None,
) -> D:
    """Rate applied to the salary clamped into ``[min_ceiling, max_ceiling]``."""
    return clamp(gross_salary, min_ceiling, max_ceiling) * rate


def threshold_levy(
    monthly_payroll: D,
    rate: D,
    annual_threshold: D,
    *,
    inclusive: bool,
) -> D:
    """Levy on the monthly payroll, all-or-nothing on the annualised amount.

    ``inclusive`` selects ``>=`` (Namibia VET) over ``>`` (South Africa SDL).
    """
    annual = monthly_payroll * MONTHS_PER_YEAR
    applies = annual >= annual_threshold if inclusive else annual > annual_threshold
    if not applies:
        return ZERO
    return monthly_payroll * rate


__all__ = ["capped_contribution", "clamp", "threshold_levy"]
