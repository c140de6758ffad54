"""Payslip presentation helpers for document generators.

Amounts are shown with two decimals and comma thousands separators, prefixed
with the country's currency symbol (``N$`` for Namibia, ``R`` for South Africa).
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from paymaster.core.models import LineItemType, PayrollCalculationResult
from paymaster.core.money import round_cents, sum_decimals, to_decimal
from paymaster.tax.dispatch import get_jurisdiction_adapter

D = Decimal


@dataclass(frozen=True)
class PayslipRow:
    code: str
    description: str
    amount: D


@dataclass(frozen=True)
class PayslipSection:
    title: str
    rows: tuple[PayslipRow, ...]
    total: D


@dataclass(frozen=True)
class PayslipSummary:
    country: str
    currency_symbol: str
    tax_period: str
    earnings: PayslipSection
    deductions: PayslipSection
    employer: PayslipSection
    net_salary: D


def currency_symbol(country: str) -> str:
    return get_jurisdiction_adapter(country).currency_symbol


def format_amount(value: Decimal | float | int | None) -> str:
    if value is None:
        return ""
    return f"{round_cents(to_decimal(value)):,.2f}"


def format_money(value: Decimal | float | int | None, country: str) -> str:
    return f"{currency_symbol(country)} {format_amount(value)}"


def _section(result: PayrollCalculationResult, title: str, item_type: LineItemType) -> PayslipSection:
    rows = tuple(
        PayslipRow(item.code, item.description, item.amount) for item in result.line_items_of(item_type)
    )
    return PayslipSection(title=title, rows=rows, total=sum_decimals(row.amount for row in rows))


def build_payslip_summary(result: PayrollCalculationResult) -> PayslipSummary:
    return PayslipSummary(
        country=result.country,
        currency_symbol=currency_symbol(result.country),
        tax_period=f"{result.tax_year}-{result.tax_month:02d}",
        earnings=_section(result, "Earnings", LineItemType.EARNING),
        deductions=_section(result, "Deductions", LineItemType.DEDUCTION),
        employer=_section(result, "Employer Contributions", LineItemType.EMPLOYER_CONTRIBUTION),
        net_salary=result.net_salary,
    )


def render_payslip_text(result: PayrollCalculationResult, width: int = 48) -> str:
    summary = build_payslip_summary(result)

    def money(value: D) -> str:
        return f"{summary.currency_symbol} {format_amount(value)}"

    def row(label: str, value: D) -> str:
        amount = money(value)
        return f"{label[: width - len(amount) - 1]:<{width - len(amount)}}{amount}"

    lines = [f"Payslip ({summary.country}, tax pack {summary.tax_period})", "=" * width]
    for section in (summary.earnings, summary.deductions, summary.employer):
        if not section.rows:
            continue
        lines.append(section.title)
        lines.extend(row(f"  {r.description}", r.amount) for r in section.rows)
        lines.append(row(f"  Total {section.title.lower()}", section.total))
    lines.append("-" * width)
    lines.append(row("Net Pay", summary.net_salary))
    return "\n".join(lines)


__all__ = [
    "PayslipRow",
    "PayslipSection",
    "PayslipSummary",
    "build_payslip_summary",
    "currency_symbol",
    "format_amount",
    "format_money",
    "render_payslip_text",
]
