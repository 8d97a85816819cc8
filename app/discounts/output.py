"""Renders discount outcomes as output lines."""
from decimal import Decimal
from typing import Iterable

from app.discounts.dataclasses import ParseFailure
from app.discounts.pydantic_models import DiscountedTransactionModel

IGNORED_SUFFIX = "Ignored"
NO_DISCOUNT = "-"


def format_amount(x: Decimal) -> str:
    return f"{x:.2f}"


def format_result(result: DiscountedTransactionModel | ParseFailure) -> str:
    """Format an outcome as
    ``<date> <size code> <carrier code> <reduced price> <discount>``,
    where a zero discount is shown as '-'. Parse failures are echoed back
    followed by 'Ignored'."""
    if isinstance(result, ParseFailure):
        return f"{result.raw} {IGNORED_SUFFIX}"
    discount = (
        NO_DISCOUNT if result.discount == 0 else format_amount(result.discount)
    )
    return " ".join(
        (
            result.date.isoformat(),
            result.package_size.value,
            result.carrier.value,
            format_amount(result.reduced_price),
            discount,
        )
    )


def format_results(
    results: Iterable[DiscountedTransactionModel | ParseFailure],
) -> list[str]:
    return [format_result(result) for result in results]
