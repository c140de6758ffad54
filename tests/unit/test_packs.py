from decimal import Decimal as D

import pytest
from pydantic import ValidationError

from paymaster.tax.na2025 import NAMIBIA_TAX_PACK_2025_03
from paymaster.tax.packs import NamibiaTaxPack, SouthAfricaTaxPack, parse_tax_pack
from paymaster.tax.za2025 import SOUTH_AFRICA_TAX_PACK_2025_03


def test_packs_are_immutable() -> None:
    with pytest.raises(ValidationError):
        NAMIBIA_TAX_PACK_2025_03.vet_levy_rate = D("0.5")


def test_round_trip_through_stored_data() -> None:
    stored = SOUTH_AFRICA_TAX_PACK_2025_03.model_dump(mode="json", by_alias=True)
    assert "payeBrackets" in stored and "uifMaxCeiling" in stored
    restored = parse_tax_pack(stored)
    assert isinstance(restored, SouthAfricaTaxPack)
    assert restored == SOUTH_AFRICA_TAX_PACK_2025_03


def test_country_fills_missing_jurisdiction() -> None:
    stored = NAMIBIA_TAX_PACK_2025_03.model_dump(by_alias=True, exclude={"jurisdiction"})
    assert isinstance(parse_tax_pack(stored, country="na"), NamibiaTaxPack)


def test_unknown_jurisdiction_rejected() -> None:
    stored = NAMIBIA_TAX_PACK_2025_03.model_dump(by_alias=True, exclude={"jurisdiction"})
    with pytest.raises(ValidationError):
        parse_tax_pack(stored, country="KE")


def test_ssc_floor_above_ceiling_rejected() -> None:
    data = NAMIBIA_TAX_PACK_2025_03.model_dump()
    data.update(ssc_min_ceiling=D("20000"))
    with pytest.raises(ValidationError, match="SSC floor"):
        NamibiaTaxPack(**data)


def test_effective_period() -> None:
    assert SOUTH_AFRICA_TAX_PACK_2025_03.effective_from.isoformat() == "2025-03-01"
    assert SOUTH_AFRICA_TAX_PACK_2025_03.period_label == "2025-03"
