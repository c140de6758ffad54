from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Dict, Generic, Protocol, TypeVar

from paymaster.core.errors import InvalidInputError, ValidationIssue
from paymaster.core.models import PayrollCalculationInput
from paymaster.core.money import round_cents, to_decimal
from paymaster.tax.packs import NamibiaTaxPack, SouthAfricaTaxPack

D = Decimal

PackT = TypeVar("PackT", NamibiaTaxPack, SouthAfricaTaxPack)


@dataclass(frozen=True)
class MonthlyAmounts:
    """Caller amounts rounded to cents once, before any calculation uses them."""

    gross_salary: D
    medical_aid: D
    pension: D
    other_deductions: D

    @classmethod
    def from_input(cls, req: PayrollCalculationInput) -> "MonthlyAmounts":
        return cls(
            gross_salary=round_cents(to_decimal(req.gross_salary)),
            medical_aid=round_cents(to_decimal(req.medical_aid)),
            pension=round_cents(to_decimal(req.pension)),
            other_deductions=round_cents(to_decimal(req.other_deductions)),
        )


@dataclass(frozen=True)
class JurisdictionPayroll(ABC):
    """Cent-rounded amounts shared by every jurisdiction's result."""

    gross_salary: D
    taxable_income: D
    paye: D
    medical_aid: D
    pension: D
    other_deductions: D
    total_deductions: D
    net_salary: D
    total_employer_cost: D

    @property
    @abstractmethod
    def statutory_employee(self) -> D:
        ...

    @property
    @abstractmethod
    def statutory_employer(self) -> D:
        ...

    @property
    @abstractmethod
    def levy(self) -> D:
        ...

    @abstractmethod
    def jurisdiction_fields(self) -> Dict[str, D]:
        ...


class PayrollCalculator(Protocol):
    def calculate(self, req: PayrollCalculationInput) -> JurisdictionPayroll: ...


@dataclass(frozen=True)
class LineItemLabel:
    code: str
    description: str


@dataclass(frozen=True)
class JurisdictionAdapter(Generic[PackT]):
    code: str
    name: str
    currency_symbol: str
    default_pack: PackT
    calculator_factory: Callable[[PackT], PayrollCalculator]
    employee_contribution: LineItemLabel
    employer_contribution: LineItemLabel
    levy: LineItemLabel

    def resolve_pack(self, tax_pack: NamibiaTaxPack | SouthAfricaTaxPack | None = None) -> PackT:
        if tax_pack is None:
            return self.default_pack
        if tax_pack.jurisdiction != self.code:
            raise InvalidInputError(
                [
                    ValidationIssue(
                        "tax_pack_jurisdiction_mismatch",
                        f"Tax pack for {tax_pack.jurisdiction} cannot be used for {self.code}.",
                        "tax_pack",
                    )
                ]
            )
        return tax_pack  # type: ignore[return-value]

    def calculator(self, tax_pack: NamibiaTaxPack | SouthAfricaTaxPack | None = None) -> PayrollCalculator:
        return self.calculator_factory(self.resolve_pack(tax_pack))

    def compute(self, req: PayrollCalculationInput) -> JurisdictionPayroll:
        return self.calculator(req.tax_pack).calculate(req)


def applicable(flag: bool | None, *, default: bool) -> bool:
    return default if flag is None else flag
