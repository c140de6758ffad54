"""Single entry point for payroll calculations.

``calculate_payroll`` looks up the jurisdiction adapter for the country code,
validates the request, runs the jurisdiction calculator and projects its typed
result onto the normalized :class:`PayrollCalculationResult`, including the
payslip line items.

Line item order is a contract with document generation and must not change:
``BASIC`` first (always present), then deductions ``PAYE`` → statutory
employee contribution → ``MED_AID`` → ``PENSION`` → ``OTHER``, then employer
contributions (statutory employer contribution → levy). Every line except
``BASIC`` is dropped when its amount is zero.

Caller amounts (gross salary and the three deductions) are rounded to cents
once, on entry to the jurisdiction calculator. Computed components are rounded
when the jurisdiction result is assembled, and totals are sums of those rounded
components, so ``net_salary + total_deductions == gross_salary`` exactly.
"""
from __future__ import annotations

import logging
from decimal import Decimal

from paymaster.core.errors import InvalidInputError
from paymaster.core.models import (
    LineItemType,
    PayrollCalculationInput,
    PayrollCalculationResult,
    PayslipLineItem,
)
from paymaster.core.money import ZERO
from paymaster.core.validate import validate_calculation_input
from paymaster.tax.dispatch import get_jurisdiction_adapter
from paymaster.tax.jurisdictions.base import JurisdictionAdapter, JurisdictionPayroll, LineItemLabel

D = Decimal

logger = logging.getLogger("paymaster")

BASIC = LineItemLabel("BASIC", "Basic Salary")
PAYE = LineItemLabel("PAYE", "Pay As You Earn Tax")
MEDICAL_AID = LineItemLabel("MED_AID", "Medical Aid")
PENSION = LineItemLabel("PENSION", "Pension Fund")
OTHER_DEDUCTIONS = LineItemLabel("OTHER", "Other Deductions")


def _line(item_type: LineItemType, label: LineItemLabel, amount: D) -> PayslipLineItem:
    return PayslipLineItem(type=item_type, code=label.code, description=label.description, amount=amount)


def build_line_items(adapter: JurisdictionAdapter, payroll: JurisdictionPayroll) -> tuple[PayslipLineItem, ...]:
    items = [_line(LineItemType.EARNING, BASIC, payroll.gross_salary)]
    deductions = (
        (PAYE, payroll.paye),
        (adapter.employee_contribution, payroll.statutory_employee),
        (MEDICAL_AID, payroll.medical_aid),
        (PENSION, payroll.pension),
        (OTHER_DEDUCTIONS, payroll.other_deductions),
    )
    employer = (
        (adapter.employer_contribution, payroll.statutory_employer),
        (adapter.levy, payroll.levy),
    )
    items.extend(_line(LineItemType.DEDUCTION, label, amount) for label, amount in deductions if amount > ZERO)
    items.extend(
        _line(LineItemType.EMPLOYER_CONTRIBUTION, label, amount) for label, amount in employer if amount > ZERO
    )
    return tuple(items)


def normalize_result(
    adapter: JurisdictionAdapter,
    req: PayrollCalculationInput,
    payroll: JurisdictionPayroll,
) -> PayrollCalculationResult:
    pack = adapter.resolve_pack(req.tax_pack)
    return PayrollCalculationResult(
        country=adapter.code,
        tax_year=pack.year,
        tax_month=pack.month,
        gross_salary=payroll.gross_salary,
        age=req.age,
        medical_aid_members=req.medical_aid_members,
        ssc_applicable=req.ssc_applicable,
        uif_applicable=req.uif_applicable,
        sdl_applicable=req.sdl_applicable,
        vet_levy_applicable=req.vet_levy_applicable,
        taxable_income=payroll.taxable_income,
        paye=payroll.paye,
        medical_aid=payroll.medical_aid,
        pension=payroll.pension,
        other_deductions=payroll.other_deductions,
        total_deductions=payroll.total_deductions,
        net_salary=payroll.net_salary,
        total_employer_cost=payroll.total_employer_cost,
        line_items=build_line_items(adapter, payroll),
        **payroll.jurisdiction_fields(),
    )


def calculate_payroll(req: PayrollCalculationInput) -> PayrollCalculationResult:
    adapter = get_jurisdiction_adapter(req.country)
    issues = validate_calculation_input(req)
    if issues:
        raise InvalidInputError(issues)
    payroll = adapter.compute(req)
    result = normalize_result(adapter, req, payroll)
    logger.debug(
        "Calculated payroll country=%s tax_pack=%s-%02d line_items=%s",
        result.country,
        result.tax_year,
        result.tax_month,
        len(result.line_items),
    )
    return result


__all__ = ["build_line_items", "calculate_payroll", "normalize_result"]
