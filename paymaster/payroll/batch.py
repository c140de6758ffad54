"""Period runs: one calculation per active employee plus period totals.

Nothing here persists; callers store the returned :class:`PeriodRun`.
"""
from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from paymaster.config import get_settings
from paymaster.core.models import PayrollCalculationInput, PayrollCalculationResult
from paymaster.core.money import sum_decimals
from paymaster.payroll.engine import calculate_payroll
from paymaster.tax.dispatch import get_jurisdiction_adapter
from paymaster.tax.packs import TaxPack

D = Decimal

logger = logging.getLogger("paymaster")


class _BatchModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class EmployeeRecord(_BatchModel):
    id: str
    first_name: str = ""
    last_name: str = ""
    basic_salary: D
    date_of_birth: date | None = None
    medical_aid: D | None = None
    medical_aid_members: int | None = None
    pension: D | None = None
    other_deductions: D | None = None
    ssc_applicable: bool | None = None
    uif_applicable: bool | None = None
    sdl_applicable: bool | None = None
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class EmployeePayslip(_BatchModel):
    employee_id: str
    employee_name: str
    payroll_period_id: str
    calculation: PayrollCalculationResult


class PeriodTotals(_BatchModel):
    employee_count: int
    total_gross: D
    total_net: D
    total_paye: D
    total_deductions: D
    total_employer_cost: D
    total_statutory_employee: D
    total_statutory_employer: D
    total_levy: D


class PeriodRun(_BatchModel):
    period_id: str
    country: str
    payslips: tuple[EmployeePayslip, ...]
    totals: PeriodTotals


def calculate_age(date_of_birth: date | None, as_of: date, default_age: int | None = None) -> int:
    if date_of_birth is None:
        return get_settings().default_employee_age if default_age is None else default_age
    age = as_of.year - date_of_birth.year
    if (as_of.month, as_of.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def build_calculation_input(
    employee: EmployeeRecord,
    country: str,
    *,
    as_of: date,
    tax_pack: TaxPack | None = None,
    vet_levy_applicable: bool = False,
    default_age: int | None = None,
) -> PayrollCalculationInput:
    return PayrollCalculationInput(
        country=country,
        gross_salary=employee.basic_salary,
        age=calculate_age(employee.date_of_birth, as_of, default_age),
        medical_aid=employee.medical_aid,
        medical_aid_members=employee.medical_aid_members,
        pension=employee.pension,
        other_deductions=employee.other_deductions,
        ssc_applicable=employee.ssc_applicable,
        uif_applicable=employee.uif_applicable,
        sdl_applicable=employee.sdl_applicable,
        # VET levy registration belongs to the company, not the employee
        vet_levy_applicable=vet_levy_applicable,
        tax_pack=tax_pack,
    )


def summarize_period(calculations: Iterable[PayrollCalculationResult]) -> PeriodTotals:
    results = list(calculations)
    return PeriodTotals(
        employee_count=len(results),
        total_gross=sum_decimals(r.gross_salary for r in results),
        total_net=sum_decimals(r.net_salary for r in results),
        total_paye=sum_decimals(r.paye for r in results),
        total_deductions=sum_decimals(r.total_deductions for r in results),
        total_employer_cost=sum_decimals(r.total_employer_cost for r in results),
        total_statutory_employee=sum_decimals(r.statutory_employee for r in results),
        total_statutory_employer=sum_decimals(r.statutory_employer for r in results),
        total_levy=sum_decimals(r.levy for r in results),
    )


def process_payroll_period(
    period_id: str,
    employees: Iterable[EmployeeRecord],
    country: str,
    *,
    as_of: date,
    tax_pack: TaxPack | None = None,
    vet_levy_applicable: bool = False,
    default_age: int | None = None,
) -> PeriodRun:
    adapter = get_jurisdiction_adapter(country)
    active = [employee for employee in employees if employee.is_active]
    logger.info("Processing payroll period %s country=%s employees=%s", period_id, adapter.code, len(active))

    payslips: list[EmployeePayslip] = []
    for employee in active:
        req = build_calculation_input(
            employee,
            adapter.code,
            as_of=as_of,
            tax_pack=tax_pack,
            vet_levy_applicable=vet_levy_applicable,
            default_age=default_age,
        )
        payslips.append(
            EmployeePayslip(
                employee_id=employee.id,
                employee_name=employee.full_name,
                payroll_period_id=period_id,
                calculation=calculate_payroll(req),
            )
        )

    totals = summarize_period(slip.calculation for slip in payslips)
    logger.info("Processed payroll period %s payslips=%s", period_id, totals.employee_count)
    return PeriodRun(period_id=period_id, country=adapter.code, payslips=tuple(payslips), totals=totals)


__all__ = [
    "EmployeePayslip",
    "EmployeeRecord",
    "PeriodRun",
    "PeriodTotals",
    "build_calculation_input",
    "calculate_age",
    "process_payroll_period",
    "summarize_period",
]
