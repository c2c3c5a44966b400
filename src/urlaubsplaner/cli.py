"""
Urlaubsplaner CLI

Command-line access to the calendar and quota engine.

Usage:
    urlaubsplaner holidays --year 2025 --state BY
    urlaubsplaner classify --date 2025-12-24 --state BE
    urlaubsplaner range --anchor 2025-06-06 --target 2025-06-02 --state NW
    urlaubsplaner quota --ledger alice.yaml --year 2025
    urlaubsplaner validate-ledger --ledger alice.yaml

Exit Codes:
    0   OK                   - Command succeeded
    10  INPUT_INVALID        - Invalid arguments (date, year, state)
    11  LEDGER_ERROR         - Ledger file could not be loaded or validated
    12  INCONSISTENT_ABSENCE - Strict quota run found absences on non-workdays
    20  INTERNAL_ERROR       - Unexpected internal error
"""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import Optional, Sequence

from .canon import canonical_json
from .config import EngineSettings, configure_logging
from .engine import QuotaAccountant, WorkingDayClassifier, expand_range
from .calendars import holidays_for
from .exceptions import (
    InconsistentAbsence,
    InvalidDate,
    LedgerLoadError,
    LedgerValidationError,
    UrlaubsplanerError,
)
from .ledger import LedgerLoader
from .models import Jurisdiction

logger = logging.getLogger(__name__)


# ============================================================================
# EXIT CODES
# ============================================================================

class ExitCode:
    """Deterministic exit codes for scripting."""
    OK = 0
    INPUT_INVALID = 10
    LEDGER_ERROR = 11
    INCONSISTENT_ABSENCE = 12
    INTERNAL_ERROR = 20


# ============================================================================
# OUTPUT HELPERS
# ============================================================================

class Colors:
    """ANSI color codes for terminal output."""
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    END = '\033[0m'

    @classmethod
    def disable(cls):
        cls.CYAN = ''
        cls.GREEN = ''
        cls.YELLOW = ''
        cls.RED = ''
        cls.BOLD = ''
        cls.END = ''


def print_header(text: str):
    print(f"\n{Colors.BOLD}{Colors.CYAN}{'='*60}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.CYAN}{text}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.CYAN}{'='*60}{Colors.END}")


def print_success(text: str):
    print(f"{Colors.GREEN}[OK] {text}{Colors.END}")


def print_error(text: str):
    print(f"{Colors.RED}[ERROR] {text}{Colors.END}", file=sys.stderr)


def print_warning(text: str):
    print(f"{Colors.YELLOW}[WARN] {text}{Colors.END}")


def print_kv(key: str, value: str, indent: int = 0):
    spaces = "  " * indent
    print(f"{spaces}{Colors.BOLD}{key}:{Colors.END} {value}")


# ============================================================================
# ARGUMENT HELPERS
# ============================================================================

def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise InvalidDate(
            message=f"Not an ISO date (YYYY-MM-DD): {value!r}",
            details={"value": value},
        ) from e


def _state(args: argparse.Namespace, settings: EngineSettings) -> Jurisdiction:
    return Jurisdiction.from_code(args.state) if args.state else settings.default_state


def _check_year(year: int, settings: EngineSettings) -> bool:
    if settings.is_supported_year(year):
        return True
    print_error(f"Year {year} outside supported range {settings.min_year}-{settings.max_year}")
    return False


# ============================================================================
# COMMANDS
# ============================================================================

def cmd_holidays(args, settings: EngineSettings) -> int:
    """List the holidays of a state for a year."""
    if not _check_year(args.year, settings):
        return ExitCode.INPUT_INVALID
    state = _state(args, settings)
    entries = holidays_for(args.year, state)

    if args.json:
        print(canonical_json([e.to_dict() for e in entries]))
        return ExitCode.OK

    print_header(f"Feiertage {args.year} - {state.display_name}")
    for entry in entries:
        suffix = " (halber Tag)" if entry.is_half else ""
        print(f"  {entry.date.isoformat()}  {entry.date.strftime('%a')}  {entry.name}{suffix}")
    return ExitCode.OK


def cmd_classify(args, settings: EngineSettings) -> int:
    """Classify a single date."""
    state = _state(args, settings)
    d = _parse_date(args.date)
    if not _check_year(d.year, settings):
        return ExitCode.INPUT_INVALID
    classifier = WorkingDayClassifier.for_jurisdiction(state)
    kind = classifier.classify(d)
    name = classifier.holiday_name(d)
    print(f"{d.isoformat()} {kind.value}" + (f" ({name})" if name else ""))
    return ExitCode.OK


def cmd_range(args, settings: EngineSettings) -> int:
    """Expand a selection range to its working days."""
    state = _state(args, settings)
    anchor, target = _parse_date(args.anchor), _parse_date(args.target)
    if not (_check_year(anchor.year, settings) and _check_year(target.year, settings)):
        return ExitCode.INPUT_INVALID
    dates = expand_range(anchor, target, state)

    if args.json:
        print(canonical_json(dates))
        return ExitCode.OK

    for d in dates:
        print(d.isoformat())
    print_success(f"{len(dates)} working days")
    return ExitCode.OK


def cmd_quota(args, settings: EngineSettings) -> int:
    """Compute quota results from a ledger file."""
    try:
        ledger = LedgerLoader(settings=settings).load(args.ledger)
    except (LedgerLoadError, LedgerValidationError) as e:
        print_error(str(e))
        return ExitCode.LEDGER_ERROR

    state = Jurisdiction.from_code(args.state) if args.state else ledger.state
    accountant = QuotaAccountant.for_jurisdiction(state, strict=args.strict or settings.strict_absences)

    if args.year is not None:
        if not _check_year(args.year, settings):
            return ExitCode.INPUT_INVALID
        years = [args.year]
    else:
        years = ledger.years()

    try:
        results = [
            accountant.accumulate(year, ledger.base_allowance(year), ledger.absences)
            for year in years
        ]
    except InconsistentAbsence as e:
        print_error(str(e))
        return ExitCode.INCONSISTENT_ABSENCE

    if args.json:
        print(canonical_json([r.to_dict() for r in results]))
        return ExitCode.OK

    print_header(f"Urlaubskontingent - {state.display_name}")
    for result in results:
        print()
        print_kv("Jahr", str(result.year))
        print_kv("Kontingent", str(result.base_allowance), indent=1)
        print_kv("Verbraucht", str(result.consumed), indent=1)
        print_kv("Rest", str(result.remaining), indent=1)
        if result.special_leave:
            print_kv("Sonderurlaub", str(result.special_leave), indent=1)
        if result.unpaid_leave:
            print_kv("Unbezahlt", str(result.unpaid_leave), indent=1)
        for warning in result.warnings:
            print_warning(warning.message)
    return ExitCode.OK


def cmd_validate_ledger(args, settings: EngineSettings) -> int:
    """Validate a ledger file."""
    try:
        ledger = LedgerLoader(settings=settings).load(args.ledger)
    except (LedgerLoadError, LedgerValidationError) as e:
        print_error(str(e))
        for error in e.details.get("errors", []):
            loc = ".".join(str(part) for part in error.get("loc", ()))
            print(f"  {loc}: {error.get('msg')}", file=sys.stderr)
        return ExitCode.LEDGER_ERROR

    print_success(
        f"Ledger valid: {len(ledger.absences)} absences, "
        f"{len(ledger.quotas)} quota overrides, state {ledger.state.value}"
    )
    return ExitCode.OK


# ============================================================================
# MAIN
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="urlaubsplaner",
        description="Urlaubsplaner - holiday calendar and vacation quota engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit Codes:
  0   OK                   Command succeeded
  10  INPUT_INVALID        Invalid arguments
  11  LEDGER_ERROR         Ledger could not be loaded or validated
  12  INCONSISTENT_ABSENCE Strict run found absences on non-workdays
  20  INTERNAL_ERROR       Unexpected error
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    hol_parser = subparsers.add_parser("holidays", help="List holidays of a state")
    hol_parser.add_argument("--year", "-y", type=int, required=True, help="Calendar year")
    hol_parser.add_argument("--state", "-s", help="State code (default from settings)")
    hol_parser.add_argument("--json", action="store_true", help="Canonical JSON output")
    hol_parser.set_defaults(func=cmd_holidays)

    cls_parser = subparsers.add_parser("classify", help="Classify a single date")
    cls_parser.add_argument("--date", "-d", required=True, help="ISO date")
    cls_parser.add_argument("--state", "-s", help="State code (default from settings)")
    cls_parser.set_defaults(func=cmd_classify)

    range_parser = subparsers.add_parser("range", help="Working days between two dates")
    range_parser.add_argument("--anchor", "-a", required=True, help="First date")
    range_parser.add_argument("--target", "-t", required=True, help="Second date")
    range_parser.add_argument("--state", "-s", help="State code (default from settings)")
    range_parser.add_argument("--json", action="store_true", help="Canonical JSON output")
    range_parser.set_defaults(func=cmd_range)

    quota_parser = subparsers.add_parser("quota", help="Compute remaining vacation days")
    quota_parser.add_argument("--ledger", "-l", required=True, help="Ledger YAML/JSON file")
    quota_parser.add_argument("--year", "-y", type=int, help="Year (default: all years in ledger)")
    quota_parser.add_argument("--state", "-s", help="Override the ledger's state")
    quota_parser.add_argument("--strict", action="store_true",
                              help="Fail on absences stored on non-workdays")
    quota_parser.add_argument("--json", action="store_true", help="Canonical JSON output")
    quota_parser.set_defaults(func=cmd_quota)

    val_parser = subparsers.add_parser("validate-ledger", help="Validate a ledger file")
    val_parser.add_argument("--ledger", "-l", required=True, help="Ledger YAML/JSON file")
    val_parser.set_defaults(func=cmd_validate_ledger)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    if not sys.stdout.isatty():
        Colors.disable()

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        settings = EngineSettings.from_env()
        configure_logging(settings)
        return args.func(args, settings)
    except UrlaubsplanerError as e:
        print_error(str(e))
        return ExitCode.INPUT_INVALID
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        return ExitCode.INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
