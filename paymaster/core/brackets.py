from __future__ import annotations

from decimal import Decimal
from typing import Any, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from paymaster.core.errors import InvalidInputError, ValidationIssue
from paymaster.core.money import ZERO

D = Decimal

_UNBOUNDED_MARKERS = {"inf", "infinity", "+inf", "+infinity", "none", ""}


class TaxBracket(BaseModel):
    """One band of a progressive table: ``(income - lower) * rate + fixed_amount``."""

    lower: D = Field(..., validation_alias=AliasChoices("lower", "min"))
    upper: D | None = Field(None, validation_alias=AliasChoices("upper", "max"))
    rate: D = Field(..., ge=0, le=1)
    fixed_amount: D = Field(
        D("0"),
        ge=0,
        validation_alias=AliasChoices("fixed_amount", "fixedAmount"),
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("upper", mode="before")
    @classmethod
    def _unbounded_upper(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, float) and value == float("inf"):
            return None
        if isinstance(value, str) and value.strip().lower() in _UNBOUNDED_MARKERS:
            return None
        return value

    def contains(self, income: D) -> bool:
        if income < self.lower:
            return False
        return self.upper is None or income <= self.upper

    def tax(self, income: D) -> D:
        return (income - self.lower) * self.rate + self.fixed_amount


def bracket_issues(brackets: Sequence[TaxBracket]) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if not brackets:
        return [ValidationIssue("brackets_empty", "Bracket table must not be empty.", "paye_brackets")]
    if brackets[0].lower != ZERO:
        issues.append(
            ValidationIssue(
                "brackets_start",
                f"First bracket must start at 0, got {brackets[0].lower}.",
                "paye_brackets",
            )
        )
    for index, bracket in enumerate(brackets):
        last = index == len(brackets) - 1
        if bracket.upper is None and not last:
            issues.append(
                ValidationIssue(
                    "brackets_unbounded_inner",
                    f"Only the last bracket may be unbounded (bracket {index}).",
                    "paye_brackets",
                )
            )
        if bracket.upper is not None and last:
            issues.append(
                ValidationIssue(
                    "brackets_bounded_top",
                    f"Last bracket must be unbounded, got upper {bracket.upper}.",
                    "paye_brackets",
                )
            )
        if bracket.upper is not None and bracket.upper <= bracket.lower:
            issues.append(
                ValidationIssue(
                    "brackets_empty_band",
                    f"Bracket {index} upper {bracket.upper} must exceed lower {bracket.lower}.",
                    "paye_brackets",
                )
            )
        if index and brackets[index - 1].upper is not None:
            previous_upper = brackets[index - 1].upper
            if bracket.lower > previous_upper:
                issues.append(
                    ValidationIssue(
                        "brackets_gap",
                        f"Gap between {previous_upper} and {bracket.lower} (bracket {index}).",
                        "paye_brackets",
                    )
                )
            elif bracket.lower < previous_upper:
                issues.append(
                    ValidationIssue(
                        "brackets_overlap",
                        f"Bracket {index} starting at {bracket.lower} overlaps {previous_upper}.",
                        "paye_brackets",
                    )
                )
    return issues


def validate_brackets(brackets: Sequence[TaxBracket]) -> tuple[TaxBracket, ...]:
    issues = bracket_issues(brackets)
    if issues:
        raise InvalidInputError(issues)
    return tuple(brackets)


def find_bracket(brackets: Sequence[TaxBracket], income: D) -> TaxBracket:
    for bracket in brackets:
        if bracket.contains(income):
            return bracket
    raise InvalidInputError(
        [ValidationIssue("brackets_no_match", f"No tax bracket covers income {income}.", "paye_brackets")]
    )


def tax_from_brackets(income: D, brackets: Sequence[TaxBracket]) -> D:
    """Annual tax on ``income``; unrounded so callers can scale before rounding."""
    ti = max(ZERO, income)
    return find_bracket(brackets, ti).tax(ti)


__all__ = [
    "TaxBracket",
    "bracket_issues",
    "find_bracket",
    "tax_from_brackets",
    "validate_brackets",
]
