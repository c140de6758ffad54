"""Namibia: PAYE on the annual equivalent, SSC with a floor and ceiling, VET levy."""
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
from paymaster.tax.na2025 import NAMIBIA_TAX_PACK_2025_03
from paymaster.tax.packs import NamibiaTaxPack

D = Decimal


@dataclass(frozen=True)
class NamibiaPayroll(JurisdictionPayroll):
    ssc_employee: D
    ssc_employer: D
    vet_levy: D

    @property
    def statutory_employee(self) -> D:
        return self.ssc_employee

    @property
    def statutory_employer(self) -> D:
        return self.ssc_employer

    @property
    def levy(self) -> D:
        return self.vet_levy

    def jurisdiction_fields(self) -> Dict[str, D]:
        return {
            "ssc_employee": self.ssc_employee,
            "ssc_employer": self.ssc_employer,
            "vet_levy": self.vet_levy,
        }


@dataclass(frozen=True)
class NamibiaCalculator:
    tax_pack: NamibiaTaxPack = NAMIBIA_TAX_PACK_2025_03

    def annual_paye(self, annual_taxable: D) -> D:
        return tax_from_brackets(annual_taxable, self.tax_pack.paye_brackets)

    def monthly_paye(self, monthly_taxable: D) -> D:
        return self.annual_paye(monthly_taxable * MONTHS_PER_YEAR) / MONTHS_PER_YEAR

    def ssc(self, gross_salary: D, *, is_employer: bool = False) -> D:
        pack = self.tax_pack
        rate = pack.ssc_employer_rate if is_employer else pack.ssc_employee_rate
        return capped_contribution(gross_salary, rate, pack.ssc_max_ceiling, pack.ssc_min_ceiling)

    def vet_levy(self, monthly_payroll: D) -> D:
        return threshold_levy(
            monthly_payroll,
            self.tax_pack.vet_levy_rate,
            self.tax_pack.vet_levy_annual_threshold,
            inclusive=True,
        )

    def calculate(self, req: PayrollCalculationInput) -> NamibiaPayroll:
        amounts = MonthlyAmounts.from_input(req)
        gross, medical_aid, pension, other = (
            amounts.gross_salary,
            amounts.medical_aid,
            amounts.pension,
            amounts.other_deductions,
        )

        taxable = gross - pension - medical_aid
        paye = round_cents(self.monthly_paye(taxable))

        ssc_on = applicable(req.ssc_applicable, default=True)
        ssc_employee = round_cents(self.ssc(gross)) if ssc_on else ZERO
        ssc_employer = round_cents(self.ssc(gross, is_employer=True)) if ssc_on else ZERO
        vet = round_cents(self.vet_levy(gross)) if applicable(req.vet_levy_applicable, default=False) else ZERO

        total_deductions = paye + ssc_employee + medical_aid + pension + other
        return NamibiaPayroll(
            gross_salary=gross,
            taxable_income=round_cents(taxable),
            paye=paye,
            medical_aid=medical_aid,
            pension=pension,
            other_deductions=other,
            total_deductions=total_deductions,
            net_salary=gross - total_deductions,
            total_employer_cost=gross + ssc_employer + vet,
            ssc_employee=ssc_employee,
            ssc_employer=ssc_employer,
            vet_levy=vet,
        )


adapter: JurisdictionAdapter[NamibiaTaxPack] = JurisdictionAdapter(
    code="NA",
    name="Namibia",
    currency_symbol="N$",
    default_pack=NAMIBIA_TAX_PACK_2025_03,
    calculator_factory=NamibiaCalculator,
    employee_contribution=LineItemLabel("SSC_EE", "Social Security (Employee)"),
    employer_contribution=LineItemLabel("SSC_ER", "Social Security (Employer)"),
    levy=LineItemLabel("VET", "VET Levy"),
)
