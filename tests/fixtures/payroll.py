from datetime import date
from decimal import Decimal

from paymaster.core.models import PayrollCalculationInput
from paymaster.payroll.batch import EmployeeRecord

D = Decimal


def make_input(country: str = "NA", gross: str | int = "20000", **overrides) -> PayrollCalculationInput:
    return PayrollCalculationInput(country=country, gross_salary=D(str(gross)), **overrides)


def make_employees() -> list[EmployeeRecord]:
    return [
        EmployeeRecord(
            id="emp-001",
            first_name="Ndapewa",
            last_name="Shikongo",
            basic_salary=D("30000"),
            date_of_birth=date(1990, 6, 15),
            pension=D("1500"),
        ),
        EmployeeRecord(
            id="emp-002",
            first_name="Pieter",
            last_name="van Wyk",
            basic_salary=D("18000"),
            date_of_birth=date(1950, 1, 1),
            medical_aid=D("2100"),
            medical_aid_members=2,
        ),
        EmployeeRecord(
            id="emp-003",
            first_name="Retired",
            last_name="Record",
            basic_salary=D("12000"),
            is_active=False,
        ),
    ]
