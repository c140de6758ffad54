from __future__ import annotations

from decimal import Decimal

from paymaster.core.brackets import TaxBracket
from paymaster.tax.packs import NamibiaTaxPack

D = Decimal

# Annual PAYE table, effective March 2025 (N$)
NAMIBIA_BRACKETS_2025 = (
    TaxBracket(lower=D("0"),       upper=D("50000"),   rate=D("0"),    fixed_amount=D("0")),
    TaxBracket(lower=D("50000"),   upper=D("100000"),  rate=D("0.18"), fixed_amount=D("0")),
    TaxBracket(lower=D("100000"),  upper=D("300000"),  rate=D("0.25"), fixed_amount=D("9000")),
    TaxBracket(lower=D("300000"),  upper=D("500000"),  rate=D("0.28"), fixed_amount=D("59000")),
    TaxBracket(lower=D("500000"),  upper=D("800000"),  rate=D("0.30"), fixed_amount=D("115000")),
    TaxBracket(lower=D("800000"),  upper=D("1500000"), rate=D("0.32"), fixed_amount=D("205000")),
    TaxBracket(lower=D("1500000"), upper=None,         rate=D("0.37"), fixed_amount=D("429000")),
)

NAMIBIA_TAX_PACK_2025_03 = NamibiaTaxPack(
    year=2025,
    month=3,
    paye_brackets=NAMIBIA_BRACKETS_2025,
    ssc_employee_rate=D("0.009"),
    ssc_employer_rate=D("0.009"),
    ssc_min_ceiling=D("500"),
    ssc_max_ceiling=D("11000"),
    vet_levy_rate=D("0.01"),
    vet_levy_annual_threshold=D("1000000"),
)
