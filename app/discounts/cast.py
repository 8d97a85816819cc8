"""Provides callables for casting raw text values to the classes the
discount models expect.

Raw values come from two places: transaction lines (dates) and shipping plan
JSON files (prices). Both arrive as text and are cast before pydantic
validates the resulting value.
"""
import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from app.discounts.logging import add_trace_logging_level_if_not_exists

add_trace_logging_level_if_not_exists()
logger = logging.getLogger(__name__)


def cast_to_decimal(x: Any) -> Decimal:
    """Cast text to Decimal.

    Floats are refused since binary floating point can't represent most
    prices exactly. Decimal instances pass through unchanged.
    """
    if isinstance(x, Decimal):
        return x
    if not isinstance(x, str):
        raise TypeError(
            (
                "Number must be string to cast as Decimal not "
                f"{type(x).__name__}"
            )
        )
    try:
        return Decimal(x)
    except InvalidOperation as e:
        raise ValueError(f"invalid decimal number: {x!r}") from e


def cast_to_date(x: Any) -> date:
    """Cast ISO formatted text (e.g. '2015-02-01') to date."""
    if isinstance(x, date):
        return x
    if not isinstance(x, str):
        raise TypeError(
            f"Date must be string to cast as date not {type(x).__name__}"
        )
    # fromisoformat also takes week, ordinal and basic formats on 3.11+
    if len(x) != 10 or x[4] != "-" or x[7] != "-":
        raise ValueError(f"expected date as YYYY-MM-DD not {x!r}")
    return date.fromisoformat(x)
