from __future__ import annotations

from decimal import Decimal

from paymaster.core.brackets import TaxBracket
from paymaster.tax.packs import SouthAfricaTaxPack

D = Decimal

# Annual PAYE table, 2025/26 year of assessment (R)
SOUTH_AFRICA_BRACKETS_2025 = (
    TaxBracket(lower=D("0"),       upper=D("237100"),  rate=D("0.18"), fixed_amount=D("0")),
    TaxBracket(lower=D("237100"),  upper=D("370500"),  rate=D("0.26"), fixed_amount=D("42678")),
    TaxBracket(lower=D("370500"),  upper=D("512800"),  rate=D("0.31"), fixed_amount=D("77362")),
    TaxBracket(lower=D("512800"),  upper=D("673000"),  rate=D("0.36"), fixed_amount=D("121475")),
    TaxBracket(lower=D("673000"),  upper=D("857900"),  rate=D("0.39"), fixed_amount=D("179147")),
    TaxBracket(lower=D("857900"),  upper=D("1817000"), rate=D("0.41"), fixed_amount=D("251258")),
    TaxBracket(lower=D("1817000"), upper=None,         rate=D("0.45"), fixed_amount=D("644489")),
)

SOUTH_AFRICA_TAX_PACK_2025_03 = SouthAfricaTaxPack(
    year=2025,
    month=3,
    paye_brackets=SOUTH_AFRICA_BRACKETS_2025,
    primary_rebate=D("17235"),
    secondary_rebate=D("9444"),  # 65 and older
    tertiary_rebate=D("3145"),  # 75 and older
    uif_employee_rate=D("0.01"),
    uif_employer_rate=D("0.01"),
    uif_max_ceiling=D("17712"),
    sdl_rate=D("0.01"),
    sdl_annual_threshold=D("500000"),
    pension_deduction_cap_rate=D("0.275"),
    medical_main_member_credit=D("364"),
    medical_dependant_credit=D("246"),
)
