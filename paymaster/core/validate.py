from __future__ import annotations

from decimal import Decimal

from paymaster.core.brackets import bracket_issues
from paymaster.core.errors import ValidationIssue
from paymaster.core.models import PayrollCalculationInput

_MAX_AGE = 130

_NON_NEGATIVE_AMOUNTS = (
    ("gross_salary", "Gross salary"),
    ("medical_aid", "Medical aid"),
    ("pension", "Pension"),
    ("other_deductions", "Other deductions"),
)


def validate_calculation_input(req: PayrollCalculationInput) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for field, label in _NON_NEGATIVE_AMOUNTS:
        value: Decimal | None = getattr(req, field)
        if value is None:
            continue
        if not value.is_finite():
            issues.append(ValidationIssue(f"{field}_not_finite", f"{label} must be a finite amount.", field))
        elif value < 0:
            issues.append(ValidationIssue(f"{field}_negative", f"{label} must be zero or positive.", field))
    if req.age is not None and not 0 <= req.age <= _MAX_AGE:
        issues.append(ValidationIssue("age_out_of_range", f"Age must be between 0 and {_MAX_AGE}.", "age"))
    if req.medical_aid_members is not None and req.medical_aid_members < 0:
        issues.append(
            ValidationIssue(
                "medical_aid_members_negative",
                "Medical aid member count must be zero or positive.",
                "medical_aid_members",
            )
        )
    if req.tax_pack is not None:
        if req.tax_pack.jurisdiction != req.country:
            issues.append(
                ValidationIssue(
                    "tax_pack_jurisdiction_mismatch",
                    f"Tax pack for {req.tax_pack.jurisdiction} cannot be used for {req.country}.",
                    "tax_pack",
                )
            )
        # model_construct() skips pack validation; re-check the table here
        issues.extend(bracket_issues(req.tax_pack.paye_brackets))
    return issues


__all__ = ["validate_calculation_input"]
