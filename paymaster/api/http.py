import logging
from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from paymaster import __version__
from paymaster.config import get_settings
from paymaster.core.errors import InvalidInputError, UnsupportedJurisdictionError
from paymaster.core.models import PayrollCalculationInput, PayrollCalculationResult
from paymaster.lifespan import build_application_lifespan
from paymaster.payroll.batch import EmployeeRecord, process_payroll_period
from paymaster.payroll.engine import calculate_payroll
from paymaster.printout.payslip import build_payslip_summary, format_amount
from paymaster.tax.dispatch import list_jurisdiction_adapters
from paymaster.tax.packs import TaxPack

logger = logging.getLogger("paymaster")


async def _announce_settings(_: FastAPI) -> None:
    settings = get_settings()
    logger.info(
        "Payroll API startup complete; version=%s default_country=%s default_employee_age=%s",
        settings.build_version,
        settings.default_country,
        settings.default_employee_age,
    )


app = FastAPI(
    title="Paymaster Payroll Engine",
    version=__version__,
    description="PAYE, statutory contributions and net pay for Namibia (NA) and South Africa (ZA).",
    lifespan=build_application_lifespan("api", startup_hook=_announce_settings),
)
router = APIRouter(prefix="/payroll")


class PeriodRunRequest(BaseModel):
    period_id: str
    country: str
    as_of: date
    employees: list[EmployeeRecord] = Field(default_factory=list)
    vet_levy_applicable: bool = False
    tax_pack: TaxPack | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


def _run_calculation(req: PayrollCalculationInput) -> PayrollCalculationResult:
    try:
        return calculate_payroll(req)
    except UnsupportedJurisdictionError as exc:
        logger.warning("Rejected payroll calculation: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except InvalidInputError as exc:
        logger.warning("Rejected payroll calculation: %s", exc)
        raise HTTPException(status_code=422, detail=[asdict(issue) for issue in exc.issues]) from exc


@app.get("/health")
def health():
    settings = getattr(app.state, "settings", get_settings())
    default_tax_packs = getattr(app.state, "default_tax_packs", {})
    return {
        "status": "ok",
        "build": {
            "version": settings.build_version,
            "sha": settings.build_sha,
        },
        "default_tax_packs": default_tax_packs,
    }


@router.get("/jurisdictions")
def jurisdictions():
    return [
        {
            "code": adapter.code,
            "name": adapter.name,
            "currency_symbol": adapter.currency_symbol,
            "default_tax_pack": adapter.default_pack.model_dump(mode="json", by_alias=True),
        }
        for adapter in list_jurisdiction_adapters()
    ]


@router.post("/calculate")
def calculate(req: PayrollCalculationInput):
    return _run_calculation(req).model_dump(mode="json", by_alias=True)


@router.post("/payslip")
def payslip(req: PayrollCalculationInput):
    summary = build_payslip_summary(_run_calculation(req))
    sections = {}
    for key, section in (
        ("earnings", summary.earnings),
        ("deductions", summary.deductions),
        ("employer", summary.employer),
    ):
        sections[key] = {
            "title": section.title,
            "rows": [
                {"code": row.code, "description": row.description, "amount": format_amount(row.amount)}
                for row in section.rows
            ],
            "total": format_amount(section.total),
        }
    return {
        "country": summary.country,
        "currencySymbol": summary.currency_symbol,
        "taxPeriod": summary.tax_period,
        **sections,
        "netSalary": format_amount(summary.net_salary),
    }


@router.post("/periods/run")
def run_period(req: PeriodRunRequest):
    try:
        run = process_payroll_period(
            req.period_id,
            req.employees,
            req.country,
            as_of=req.as_of,
            tax_pack=req.tax_pack,
            vet_levy_applicable=req.vet_levy_applicable,
        )
    except UnsupportedJurisdictionError as exc:
        logger.warning("Rejected payroll period %s: %s", req.period_id, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except InvalidInputError as exc:
        logger.warning("Rejected payroll period %s: %s", req.period_id, exc)
        raise HTTPException(status_code=422, detail=[asdict(issue) for issue in exc.issues]) from exc
    return run.model_dump(mode="json", by_alias=True)


app.include_router(router)
