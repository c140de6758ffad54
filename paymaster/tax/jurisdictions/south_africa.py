"""South Africa: PAYE with age rebates and medical credits, UIF, SDL."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict

from paymaster.core.brackets import tax_from_brackets
from paymaster.core.contributions import capped_contribution, threshold_levy
from paymaster.core.models import PayrollCalculationInput
from paymaster.core.money import MONTHS_PER_YEAR, ZERO, round_cents
from paymaster.tax.jurisdictions.base import (
    JurisdictionAdapter,
    JurisdictionPayroll,
    LineItemLabel,
    MonthlyAmounts,
    applicable,
)
from paymaster.tax.packs import SouthAfricaTaxPack
from paymaster.tax.za2025 import SOUTH_AFRICA_TAX_PACK_2025_03

D = Decimal

DEFAULT_AGE = 30
SECONDARY_REBATE_AGE = 65
TERTIARY_REBATE_AGE = 75


@dataclass(frozen=True)
class SouthAfricaPayroll(JurisdictionPayroll):
    uif_employee: D
    uif_employer: D
    sdl: D
    medical_aid_tax_credit: D

    @property
    def statutory_employee(self) -> D:
        return self.uif_employee

    @property
    def statutory_employer(self) -> D:
        return self.uif_employer

    @property
    def levy(self) -> D:
        return self.sdl

    def jurisdiction_fields(self) -> Dict[str, D]:
        return {
            "uif_employee": self.uif_employee,
            "uif_employer": self.uif_employer,
            "sdl": self.sdl,
            "medical_aid_tax_credit": self.medical_aid_tax_credit,
        }


@dataclass(frozen=True)
class SouthAfricaCalculator:
    tax_pack: SouthAfricaTaxPack = SOUTH_AFRICA_TAX_PACK_2025_03

    def rebates(self, age: int = DEFAULT_AGE) -> D:
        pack = self.tax_pack
        total = pack.primary_rebate
        if age >= SECONDARY_REBATE_AGE:
            total += pack.secondary_rebate
        if age >= TERTIARY_REBATE_AGE:
            total += pack.tertiary_rebate
        return total

    def annual_paye(self, annual_taxable: D, age: int = DEFAULT_AGE) -> D:
        tax = tax_from_brackets(annual_taxable, self.tax_pack.paye_brackets) - self.rebates(age)
        return max(ZERO, tax)

    def monthly_paye(self, monthly_taxable: D, age: int = DEFAULT_AGE) -> D:
        return self.annual_paye(monthly_taxable * MONTHS_PER_YEAR, age) / MONTHS_PER_YEAR

    def medical_aid_tax_credit(self, members: int = 0) -> D:
        if members <= 0:
            return ZERO
        pack = self.tax_pack
        if members == 1:
            return pack.medical_main_member_credit
        # second member and every one after earn the dependant credit
        return pack.medical_main_member_credit + pack.medical_dependant_credit * (members - 1)

    def pension_deduction(self, gross_salary: D, pension: D) -> D:
        return min(pension, gross_salary * self.tax_pack.pension_deduction_cap_rate)

    def uif(self, gross_salary: D, *, is_employer: bool = False) -> D:
        pack = self.tax_pack
        rate = pack.uif_employer_rate if is_employer else pack.uif_employee_rate
        return capped_contribution(gross_salary, rate, pack.uif_max_ceiling)

    def sdl(self, monthly_payroll: D) -> D:
        return threshold_levy(
            monthly_payroll,
            self.tax_pack.sdl_rate,
            self.tax_pack.sdl_annual_threshold,
            inclusive=False,
        )

    def calculate(self, req: PayrollCalculationInput) -> SouthAfricaPayroll:
        amounts = MonthlyAmounts.from_input(req)
        gross, medical_aid, pension, other = (
            amounts.gross_salary,
            amounts.medical_aid,
            amounts.pension,
            amounts.other_deductions,
        )
        age = DEFAULT_AGE if req.age is None else req.age

        credit = self.medical_aid_tax_credit(req.medical_aid_members or 0)
        # relief is capped for tax; the full pension is still withheld below
        taxable = gross - self.pension_deduction(gross, pension)
        paye = round_cents(max(ZERO, self.monthly_paye(taxable, age) - credit))

        uif_on = applicable(req.uif_applicable, default=True)
        uif_employee = round_cents(self.uif(gross)) if uif_on else ZERO
        uif_employer = round_cents(self.uif(gross, is_employer=True)) if uif_on else ZERO
        sdl = round_cents(self.sdl(gross)) if applicable(req.sdl_applicable, default=False) else ZERO

        total_deductions = paye + uif_employee + pension + medical_aid + other
        return SouthAfricaPayroll(
            gross_salary=gross,
            taxable_income=round_cents(taxable),
            paye=paye,
            medical_aid=medical_aid,
            pension=pension,
            other_deductions=other,
            total_deductions=total_deductions,
            net_salary=gross - total_deductions,
            total_employer_cost=gross + uif_employer + sdl,
            uif_employee=uif_employee,
            uif_employer=uif_employer,
            sdl=sdl,
            medical_aid_tax_credit=round_cents(credit),
        )


adapter: JurisdictionAdapter[SouthAfricaTaxPack] = JurisdictionAdapter(
    code="ZA",
    name="South Africa",
    currency_symbol="R",
    default_pack=SOUTH_AFRICA_TAX_PACK_2025_03,
    calculator_factory=SouthAfricaCalculator,
    employee_contribution=LineItemLabel("UIF_EE", "UIF (Employee)"),
    employer_contribution=LineItemLabel("UIF_ER", "UIF (Employer)"),
    levy=LineItemLabel("SDL", "Skills Development Levy"),
)
