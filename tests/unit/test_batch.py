from datetime import date
from decimal import Decimal as D

import pytest

from paymaster.config import get_settings
from paymaster.core.errors import UnsupportedJurisdictionError
from paymaster.payroll.batch import (
    EmployeeRecord,
    build_calculation_input,
    calculate_age,
    process_payroll_period,
    summarize_period,
)
from tests.fixtures.payroll import make_employees

AS_OF = date(2025, 3, 31)


@pytest.mark.parametrize(
    "dob, as_of, expected",
    [
        (date(1990, 6, 15), date(2025, 6, 14), 34),
        (date(1990, 6, 15), date(2025, 6, 15), 35),
        (date(1950, 1, 1), AS_OF, 75),
        (date(2000, 2, 29), date(2025, 2, 28), 24),
        (date(2000, 2, 29), date(2025, 3, 1), 25),
    ],
)
def test_calculate_age(dob: date, as_of: date, expected: int) -> None:
    assert calculate_age(dob, as_of) == expected


def test_unknown_birth_date_uses_configured_default(monkeypatch) -> None:
    assert calculate_age(None, AS_OF, default_age=30) == 30
    monkeypatch.setenv("DEFAULT_EMPLOYEE_AGE", "41")
    get_settings.cache_clear()
    try:
        assert calculate_age(None, AS_OF) == 41
    finally:
        get_settings.cache_clear()


def test_vet_levy_flag_comes_from_company() -> None:
    employee = make_employees()[0]
    req = build_calculation_input(employee, "NA", as_of=AS_OF, vet_levy_applicable=True)
    assert req.vet_levy_applicable is True
    assert req.age == 34
    assert req.gross_salary == D("30000")


def test_process_period_skips_inactive_and_totals() -> None:
    run = process_payroll_period("2025-03", make_employees(), "za", as_of=AS_OF)

    assert run.country == "ZA"
    assert [slip.employee_id for slip in run.payslips] == ["emp-001", "emp-002"]
    assert run.payslips[1].employee_name == "Pieter van Wyk"

    first, second = (slip.calculation for slip in run.payslips)
    assert first.age == 34
    assert first.paye == D("4393.08")
    assert second.age == 75
    assert second.paye == D("144.67")
    assert second.medical_aid_tax_credit == D("610.00")

    totals = run.totals
    assert totals.employee_count == 2
    assert totals.total_gross == D("48000")
    assert totals.total_paye == D("4537.75")
    assert totals.total_deductions == D("8491.99")
    assert totals.total_net == D("39508.01")
    assert totals.total_employer_cost == D("48354.24")
    assert totals.total_net + totals.total_deductions == totals.total_gross
    assert totals.total_statutory_employee == D("354.24")
    assert totals.total_statutory_employer == D("354.24")
    assert totals.total_levy == D("0")


def test_process_period_is_reproducible() -> None:
    first = process_payroll_period("2025-03", make_employees(), "NA", as_of=AS_OF)
    second = process_payroll_period("2025-03", make_employees(), "NA", as_of=AS_OF)
    assert first == second


def test_empty_period() -> None:
    totals = summarize_period([])
    assert totals.employee_count == 0
    assert totals.total_gross == 0


def test_unsupported_country_fails_before_any_calculation() -> None:
    with pytest.raises(UnsupportedJurisdictionError):
        process_payroll_period("2025-03", make_employees(), "BW", as_of=AS_OF)


def test_period_levy_totals_with_vet_registered_company() -> None:
    employees = [
        EmployeeRecord(id="emp-100", basic_salary=D("90000"), date_of_birth=date(1980, 1, 1)),
        EmployeeRecord(id="emp-101", basic_salary=D("40000"), date_of_birth=date(1985, 1, 1), ssc_applicable=False),
    ]
    run = process_payroll_period("2025-03", employees, "NA", as_of=AS_OF, vet_levy_applicable=True)
    totals = run.totals
    assert totals.total_statutory_employee == D("99.00")
    assert totals.total_statutory_employer == D("99.00")
    # only the first salary reaches N$1,000,000 a year
    assert totals.total_levy == D("900.00")
    assert totals.total_employer_cost == totals.total_gross + totals.total_statutory_employer + totals.total_levy
