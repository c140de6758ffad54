"""Tax pack models.

A tax pack is the immutable, versioned rate table for one jurisdiction and one
effective period. Packs arrive as plain data from whatever store the caller
uses, so every field also accepts its camelCase spelling.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator
from pydantic.alias_generators import to_camel

from paymaster.core.brackets import TaxBracket, validate_brackets

D = Decimal

Rate = Annotated[D, Field(ge=0, le=1)]
Amount = Annotated[D, Field(ge=0)]


class _TaxPackBase(BaseModel):
    year: int = Field(..., ge=1900, le=9999)
    month: int = Field(..., ge=1, le=12)
    paye_brackets: tuple[TaxBracket, ...]

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @field_validator("paye_brackets", mode="after")
    @classmethod
    def _contiguous_brackets(cls, value: tuple[TaxBracket, ...]) -> tuple[TaxBracket, ...]:
        return validate_brackets(value)

    @property
    def effective_from(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def period_label(self) -> str:
        return f"{self.year}-{self.month:02d}"


class NamibiaTaxPack(_TaxPackBase):
    jurisdiction: Literal["NA"] = "NA"
    ssc_employee_rate: Rate
    ssc_employer_rate: Rate
    ssc_min_ceiling: Amount
    ssc_max_ceiling: Amount
    vet_levy_rate: Rate
    vet_levy_annual_threshold: Amount = D("1000000")

    @model_validator(mode="after")
    def _ceilings_ordered(self) -> "NamibiaTaxPack":
        if self.ssc_min_ceiling > self.ssc_max_ceiling:
            raise ValueError(
                f"SSC floor {self.ssc_min_ceiling} exceeds ceiling {self.ssc_max_ceiling}"
            )
        return self


class SouthAfricaTaxPack(_TaxPackBase):
    jurisdiction: Literal["ZA"] = "ZA"
    primary_rebate: Amount
    secondary_rebate: Amount
    tertiary_rebate: Amount
    uif_employee_rate: Rate
    uif_employer_rate: Rate
    uif_max_ceiling: Amount
    sdl_rate: Rate
    sdl_annual_threshold: Amount = D("500000")
    pension_deduction_cap_rate: Rate = D("0.275")
    medical_main_member_credit: Amount = D("364")
    medical_dependant_credit: Amount = D("246")


TaxPack = Annotated[Union[NamibiaTaxPack, SouthAfricaTaxPack], Field(discriminator="jurisdiction")]

_TAX_PACK_ADAPTER: TypeAdapter[NamibiaTaxPack | SouthAfricaTaxPack] = TypeAdapter(TaxPack)


def parse_tax_pack(data: Mapping[str, Any], country: str | None = None) -> NamibiaTaxPack | SouthAfricaTaxPack:
    """Build a pack from stored data; ``country`` fills in a missing jurisdiction tag."""
    payload = dict(data)
    if "jurisdiction" not in payload and country:
        payload["jurisdiction"] = country.upper()
    return _TAX_PACK_ADAPTER.validate_python(payload)


__all__ = [
    "NamibiaTaxPack",
    "SouthAfricaTaxPack",
    "TaxPack",
    "parse_tax_pack",
]
