from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str
    field: Optional[str] = None


class PayrollError(Exception):
    """Base class for calculation failures. These are data errors, never transient."""


class InvalidInputError(PayrollError, ValueError):
    def __init__(self, issues: Iterable[ValidationIssue] | str) -> None:
        if isinstance(issues, str):
            issues = [ValidationIssue("invalid_input", issues)]
        self.issues: list[ValidationIssue] = list(issues)
        super().__init__("; ".join(issue.message for issue in self.issues))


class UnsupportedJurisdictionError(PayrollError, KeyError):
    def __init__(self, country: str) -> None:
        self.country = country
        super().__init__(f"Unsupported country code '{country}'")

    def __str__(self) -> str:
        return self.args[0]


__all__ = [
    "InvalidInputError",
    "PayrollError",
    "UnsupportedJurisdictionError",
    "ValidationIssue",
]
