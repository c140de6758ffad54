from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from paymaster.core.money import sum_decimals
from paymaster.tax.packs import TaxPack

D = Decimal


class LineItemType(str, Enum):
    EARNING = "EARNING"
    DEDUCTION = "DEDUCTION"
    EMPLOYER_CONTRIBUTION = "EMPLOYER_CONTRIBUTION"


class _PayrollModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class PayrollCalculationInput(_PayrollModel):
    """One employee, one period.

    ``ssc_applicable`` and ``uif_applicable`` are opt-out (``None`` means on);
    ``sdl_applicable`` and ``vet_levy_applicable`` are opt-in.
    """

    country: str
    gross_salary: D
    age: int | None = None
    medical_aid: D | None = None
    medical_aid_members: int | None = None
    pension: D | None = None
    other_deductions: D | None = None
    ssc_applicable: bool | None = None
    uif_applicable: bool | None = None
    sdl_applicable: bool | None = None
    vet_levy_applicable: bool | None = None
    tax_pack: TaxPack | None = None

    @field_validator("country", mode="before")
    @classmethod
    def _normalize_country(cls, value: object) -> str:
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ValueError("country must be a two-letter country code string")
        return value.strip().upper()


class PayslipLineItem(_PayrollModel):
    type: LineItemType
    code: str
    description: str
    amount: D
    quantity: D | None = None
    rate: D | None = None


class PayrollCalculationResult(_PayrollModel):
    country: str
    tax_year: int
    tax_month: int
    gross_salary: D
    age: int | None = None
    medical_aid_members: int | None = None
    taxable_income: D
    paye: D
    ssc_employee: D | None = None
    ssc_employer: D | None = None
    vet_levy: D | None = None
    uif_employee: D | None = None
    uif_employer: D | None = None
    sdl: D | None = None
    medical_aid: D
    medical_aid_tax_credit: D | None = None
    pension: D
    other_deductions: D
    total_deductions: D
    net_salary: D
    total_employer_cost: D
    ssc_applicable: bool | None = None
    uif_applicable: bool | None = None
    sdl_applicable: bool | None = None
    vet_levy_applicable: bool | None = None
    line_items: tuple[PayslipLineItem, ...] = ()

    def line_items_of(self, item_type: LineItemType) -> tuple[PayslipLineItem, ...]:
        return tuple(item for item in self.line_items if item.type == item_type)

    @property
    def statutory_employee(self) -> D:
        return sum_decimals(value for value in (self.ssc_employee, self.uif_employee) if value is not None)

    @property
    def statutory_employer(self) -> D:
        return sum_decimals(value for value in (self.ssc_employer, self.uif_employer) if value is not None)

    @property
    def levy(self) -> D:
        return sum_decimals(value for value in (self.vet_levy, self.sdl) if value is not None)


__all__ = [
    "LineItemType",
    "PayrollCalculationInput",
    "PayrollCalculationResult",
    "PayslipLineItem",
]
