import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pydantic import ValidationError

if __package__ in (None, ""):
    sys.path.append(str(Path(__file__).resolve().parent.parent))

from paymaster.config import get_settings
from paymaster.core.errors import InvalidInputError, UnsupportedJurisdictionError
from paymaster.core.models import PayrollCalculationInput
from paymaster.payroll.engine import calculate_payroll
from paymaster.printout.payslip import render_payslip_text
from paymaster.tax.dispatch import list_jurisdiction_adapters, list_supported_countries
from paymaster.tax.packs import parse_tax_pack

logger = logging.getLogger("paymaster")


def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value.replace(",", ""))
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"not an amount: {value!r}") from exc


def _tri_state(value: str) -> bool:
    lowered = value.lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    raise argparse.ArgumentTypeError(f"expected yes/no, got {value!r}")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="paymaster",
        description="Monthly payroll calculator for Namibia (NA) and South Africa (ZA).",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log calculation details to stderr.")
    sub = parser.add_subparsers(dest="command", required=True)

    calc = sub.add_parser("calculate", help="Calculate one employee's monthly payslip.")
    calc.add_argument("--country", default=settings.default_country, choices=list_supported_countries())
    calc.add_argument("--gross", type=_decimal, required=True, help="Monthly gross salary.")
    calc.add_argument("--age", type=int, help="Employee age (South Africa rebates).")
    calc.add_argument("--medical-aid", type=_decimal, help="Monthly medical aid contribution.")
    calc.add_argument("--medical-aid-members", type=int, help="Members on the medical scheme (South Africa).")
    calc.add_argument("--pension", type=_decimal, help="Monthly pension contribution.")
    calc.add_argument("--other-deductions", type=_decimal, help="Other monthly deductions.")
    calc.add_argument("--ssc", type=_tri_state, dest="ssc_applicable", help="SSC applies (default yes).")
    calc.add_argument("--uif", type=_tri_state, dest="uif_applicable", help="UIF applies (default yes).")
    calc.add_argument("--sdl", type=_tri_state, dest="sdl_applicable", help="SDL applies (default no).")
    calc.add_argument("--vet-levy", type=_tri_state, dest="vet_levy_applicable", help="VET levy applies (default no).")
    calc.add_argument("--tax-pack", type=Path, help="JSON file with an alternate tax pack.")
    calc.add_argument("--format", choices=["json", "text"], default="json")

    sub.add_parser("packs", help="Show the built-in tax packs.")
    return parser.parse_args(argv)


def _load_tax_pack(path: Path, country: str):
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidInputError(f"cannot read tax pack {path}: {exc}") from exc
    return parse_tax_pack(data, country)


def _calculate(args: argparse.Namespace) -> int:
    try:
        tax_pack = None if args.tax_pack is None else _load_tax_pack(args.tax_pack, args.country)
        req = PayrollCalculationInput(
            country=args.country,
            gross_salary=args.gross,
            age=args.age,
            medical_aid=args.medical_aid,
            medical_aid_members=args.medical_aid_members,
            pension=args.pension,
            other_deductions=args.other_deductions,
            ssc_applicable=args.ssc_applicable,
            uif_applicable=args.uif_applicable,
            sdl_applicable=args.sdl_applicable,
            vet_levy_applicable=args.vet_levy_applicable,
            tax_pack=tax_pack,
        )
        result = calculate_payroll(req)
    except ValidationError as exc:
        print(f"error: {exc.error_count()} invalid field(s)", file=sys.stderr)
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"])
            print(f"  {location}: {error['msg']}", file=sys.stderr)
        return 2
    except (InvalidInputError, UnsupportedJurisdictionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    if args.format == "text":
        print(render_payslip_text(result))
    else:
        print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
    return 0


def _packs() -> int:
    for adapter in list_jurisdiction_adapters():
        pack = adapter.default_pack
        print(f"{adapter.code}  {adapter.name:<14} tax pack {pack.period_label}  brackets={len(pack.paye_brackets)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    if args.command == "packs":
        return _packs()
    return _calculate(args)


if __name__ == "__main__":
    sys.exit(main())
