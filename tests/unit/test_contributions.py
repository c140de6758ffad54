from decimal import Decimal as D

import pytest

from paymaster.core.contributions import capped_contribution, clamp, threshold_levy


def test_clamp_applies_floor_and_ceiling() -> None:
    assert clamp(D("300"), D("500"), D("11000")) == D("500")
    assert clamp(D("20000"), D("500"), D("11000")) == D("11000")
    assert clamp(D("7000"), D("500"), D("11000")) == D("7000")
    assert clamp(D("20000"), None, D("17712")) == D("17712")
    assert clamp(D("100"), None, D("17712")) == D("100")


def test_capped_contribution_floor_and_ceiling() -> None:
    assert capped_contribution(D("300"), D("0.009"), D("11000"), D("500")) == D("4.5")
    assert capped_contribution(D("20000"), D("0.009"), D("11000"), D("500")) == D("99")


def test_capped_contribution_ceiling_only() -> None:
    assert capped_contribution(D("300"), D("0.01"), D("17712")) == D("3")
    assert capped_contribution(D("30000"), D("0.01"), D("17712")) == D("177.12")


@pytest.mark.parametrize(
    "monthly, inclusive, expected",
    [
        (D("10000"), True, D("100")),
        (D("10000"), False, D("0")),
        (D("10000.01"), False, D("100.0001")),
        (D("9999.99"), True, D("0")),
    ],
)
def test_threshold_levy_boundary(monthly: D, inclusive: bool, expected: D) -> None:
    assert threshold_levy(monthly, D("0.01"), D("120000"), inclusive=inclusive) == expected


def test_threshold_levy_is_all_or_nothing() -> None:
    assert threshold_levy(D("50000"), D("0.01"), D("1000000"), inclusive=True) == D("0")
    assert threshold_levy(D("50000"), D("0.01"), D("500000"), inclusive=False) == D("500")
