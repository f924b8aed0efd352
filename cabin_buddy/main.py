"""Command line entry point for Cabin Buddy billing and selection tools."""

import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import Any, Callable, Optional

from cabin_buddy.config import configure_logging, get_logger, settings
from cabin_buddy.services import (
    BillingCalculator,
    calculate_days_remaining,
    generate_reservation_periods,
)
from cabin_buddy.transformers import SelectionPeriodTransformer

logger = get_logger(__name__)


def _load_json(path: str) -> Any:
    with open(Path(path), encoding="utf-8") as f:
        return json.load(f)


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, default=str, ensure_ascii=False))


def _quote(args: argparse.Namespace) -> int:
    breakdown = BillingCalculator.calculate_stay_billing(
        _load_json(args.config), _load_json(args.stay)
    )
    result = breakdown.model_dump()
    result["formatted_total"] = BillingCalculator.format_currency(breakdown.total)
    _print_json({"success": True, "breakdown": result})
    return 0


def _validate(args: argparse.Namespace) -> int:
    validation = BillingCalculator.validate_billing_config(_load_json(args.config))
    _print_json({"success": validation.is_valid, **validation.model_dump()})
    return 0 if validation.is_valid else 1


def _days_remaining_lookup(started_on: date, allowed_days: int) -> Callable[[str], int]:
    """Remaining-days lookup for a turn that began on started_on."""

    def get_days_remaining(family_group: str) -> int:
        return calculate_days_remaining(started_on, allowed_days)

    return get_days_remaining


def _periods(args: argparse.Namespace) -> int:
    get_days_remaining = None
    if args.active and args.active_started_on:
        get_days_remaining = _days_remaining_lookup(
            date.fromisoformat(args.active_started_on),
            args.selection_days or settings.selection.selection_days,
        )

    info = SelectionPeriodTransformer.get_selection_period_display_info(
        _load_json(args.periods),
        args.active,
        get_days_remaining,
        selection_days=args.selection_days,
    )
    if args.upcoming:
        info = SelectionPeriodTransformer.get_upcoming_selection_periods_with_status(info)
    _print_json({"success": True, "periods": [i.model_dump(mode="json") for i in info]})
    return 0


def _rotation(args: argparse.Namespace) -> int:
    order = [group.strip() for group in args.order.split(",") if group.strip()]
    periods = generate_reservation_periods(
        organization_id=args.organization or settings.organization_id or "local",
        base_order=order,
        base_year=args.base_year,
        selection_year=args.selection_year,
        first_last_option=settings.selection.first_last_option,
        selection_days=args.selection_days or settings.selection.selection_days,
        start_month=settings.selection.start_month,
    )
    _print_json({"success": True, "periods": [p.model_dump(mode="json") for p in periods]})
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per tool."""
    parser = argparse.ArgumentParser(
        prog="cabin-buddy",
        description="Billing and selection-period tools for shared cabins",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    quote = subparsers.add_parser("quote", help="Price a stay")
    quote.add_argument("--config", required=True, help="Billing config JSON file")
    quote.add_argument("--stay", required=True, help="Stay details JSON file")
    quote.set_defaults(handler=_quote)

    validate = subparsers.add_parser("validate", help="Validate a billing config")
    validate.add_argument("--config", required=True, help="Billing config JSON file")
    validate.set_defaults(handler=_validate)

    periods = subparsers.add_parser("periods", help="Show selection period status")
    periods.add_argument("--periods", required=True, help="Reservation periods JSON file")
    periods.add_argument("--active", default=None, help="Family group selecting now")
    periods.add_argument(
        "--active-started-on",
        default=None,
        help="Day the active group's turn began (YYYY-MM-DD)",
    )
    periods.add_argument("--upcoming", action="store_true", help="Hide completed periods")
    periods.add_argument("--selection-days", type=int, default=None)
    periods.set_defaults(handler=_periods)

    rotation = subparsers.add_parser("rotation", help="Generate selection windows")
    rotation.add_argument("--order", required=True, help="Comma separated base order")
    rotation.add_argument("--base-year", type=int, required=True)
    rotation.add_argument("--selection-year", type=int, required=True)
    rotation.add_argument("--organization", default=None)
    rotation.add_argument("--selection-days", type=int, default=None)
    rotation.set_defaults(handler=_rotation)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run one CLI command.

    Returns:
        Exit code (0 on success)
    """
    args = build_parser().parse_args(argv)
    log = logger.bind(command=args.command, organization_id=settings.organization_id)

    try:
        exit_code = args.handler(args)
        log.info("Command complete", exit_code=exit_code)
        return exit_code
    except Exception as e:
        log.error("Command failed", error=str(e), exc_info=True)
        _print_json({"success": False, "error": str(e)})
        return 1


def run() -> None:
    """Console script entry point."""
    configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
