"""Command-line interface.

Reads transaction lines from a file, applies discounts and prints one
result line per input line to stdout.
"""
import argparse
import logging
import sys
from typing import Iterable

from app.discounts.catalog import PriceCatalog, load_shipping_plans
from app.discounts.logging import configure_logging
from app.discounts.output import format_results
from app.discounts.transaction import (
    MONTHLY_DISCOUNT_BUDGET,
    DiscountProcessor,
)

logger = logging.getLogger(__name__)


def _read_lines(path: str) -> list[str]:
    with open(path, encoding="utf-8") as f:
        return [line.rstrip("\r\n") for line in f]


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="shipment-discounts",
        description="Apply shipment discounts to a file of transactions.",
    )
    p.add_argument("file", help="Transactions file, one transaction per line")
    p.add_argument(
        "--shipping-plans",
        metavar="JSON",
        help="JSON file with shipping prices (defaults to built-in prices)",
    )
    p.add_argument(
        "--monthly-budget",
        default=str(MONTHLY_DISCOUNT_BUDGET),
        metavar="AMOUNT",
        help="Discount budget per month (default: %(default)s)",
    )
    p.add_argument(
        "--log-level",
        default=None,
        help=(
            "Logging level, e.g. DEBUG or TRACE (default: "
            "$SHIPMENT_DISCOUNTS_LOG_LEVEL or WARNING)"
        ),
    )
    return p


def _write_lines(lines: Iterable[str]) -> None:
    for line in lines:
        sys.stdout.write(line + "\n")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2

    try:
        if args.shipping_plans:
            catalog = PriceCatalog(load_shipping_plans(args.shipping_plans))
        else:
            catalog = PriceCatalog()
        processor = DiscountProcessor(
            monthly_budget=args.monthly_budget, catalog=catalog
        )
    except (OSError, ValueError, TypeError) as ex:
        # ValidationError is a ValueError
        logger.debug("Invalid configuration", exc_info=True)
        sys.stderr.write(f"error: invalid configuration: {ex}\n")
        return 2

    try:
        lines = _read_lines(args.file)
    except OSError as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 1

    _write_lines(format_results(processor.process_lines(lines)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
