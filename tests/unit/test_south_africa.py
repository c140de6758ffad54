from decimal import Decimal as D

import pytest

from paymaster.tax.jurisdictions.south_africa import DEFAULT_AGE, SouthAfricaCalculator
from paymaster.tax.za2025 import SOUTH_AFRICA_TAX_PACK_2025_03
from tests.fixtures.payroll import make_input

calculator = SouthAfricaCalculator()


@pytest.mark.parametrize(
    "age, expected",
    [(30, D("57397")), (64, D("57397")), (65, D("47953")), (70, D("47953")), (75, D("44808")), (80, D("44808"))],
)
def test_rebates_stack_by_age(age: int, expected: D) -> None:
    assert calculator.annual_paye(D("360000"), age) == expected


def test_rebate_amounts() -> None:
    pack = SOUTH_AFRICA_TAX_PACK_2025_03
    assert calculator.rebates(70) == pack.primary_rebate + pack.secondary_rebate
    assert calculator.rebates(80) == pack.primary_rebate + pack.secondary_rebate + pack.tertiary_rebate


def test_tax_decreases_across_age_thresholds() -> None:
    monthly = [calculator.monthly_paye(D("30000"), age) for age in (64, 65, 74, 75)]
    assert monthly[0] > monthly[1]
    assert monthly[1] == monthly[2]
    assert monthly[2] > monthly[3]


def test_rebates_floor_tax_at_zero() -> None:
    assert calculator.annual_paye(D("60000")) == 0
    assert calculator.calculate(make_input("ZA", "5000")).paye == 0


@pytest.mark.parametrize(
    "members, expected",
    [(0, D("0")), (1, D("364")), (2, D("610")), (3, D("856")), (5, D("1348"))],
)
def test_medical_aid_tax_credit(members: int, expected: D) -> None:
    assert calculator.medical_aid_tax_credit(members) == expected


def test_full_calculation_default_age() -> None:
    result = calculator.calculate(make_input("ZA", "30000"))
    assert DEFAULT_AGE == 30
    assert result.taxable_income == D("30000.00")
    assert result.paye == D("4783.08")
    assert result.uif_employee == D("177.12")
    assert result.uif_employer == D("177.12")
    assert result.sdl == 0
    assert result.total_deductions == D("4960.20")
    assert result.net_salary == D("25039.80")
    assert result.total_employer_cost == D("30177.12")


def test_pension_relief_is_capped_but_full_pension_is_withheld() -> None:
    result = calculator.calculate(make_input("ZA", "30000", pension=D("10000")))
    assert result.taxable_income == D("21750.00")
    assert result.paye == D("2638.08")
    assert result.pension == D("10000.00")
    assert result.total_deductions == D("2638.08") + D("177.12") + D("10000.00")


def test_medical_credit_reduces_paye_and_raw_amount_is_withheld() -> None:
    result = calculator.calculate(
        make_input("ZA", "30000", medical_aid=D("2500"), medical_aid_members=3)
    )
    assert result.medical_aid_tax_credit == D("856.00")
    assert result.paye == D("3927.08")
    assert result.total_deductions == D("3927.08") + D("177.12") + D("2500.00")


def test_uif_opt_out() -> None:
    result = calculator.calculate(make_input("ZA", "30000", uif_applicable=False))
    assert result.uif_employee == 0
    assert result.uif_employer == 0


def test_sdl_is_opt_in_and_threshold_gated() -> None:
    assert calculator.calculate(make_input("ZA", "50000")).sdl == 0
    result = calculator.calculate(make_input("ZA", "50000", sdl_applicable=True))
    assert result.sdl == D("500.00")
    assert calculator.calculate(make_input("ZA", "41666.66", sdl_applicable=True)).sdl == 0


def test_sdl_threshold_is_strict() -> None:
    pack = SOUTH_AFRICA_TAX_PACK_2025_03.model_copy(update={"sdl_annual_threshold": D("120000")})
    result = SouthAfricaCalculator(pack).calculate(make_input("ZA", "10000", sdl_applicable=True))
    assert result.sdl == 0
