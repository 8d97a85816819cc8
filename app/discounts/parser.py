"""Parses transaction lines.

A transaction line has three whitespace separated fields: ISO date, package
size code and carrier code, e.g. ``2015-02-01 S MR``. A line that doesn't
fit the format is not an error: it becomes a ``ParseFailure`` carrying the
line exactly as it was received.
"""
import logging
from typing import Iterable

from pydantic import ValidationError

from app.discounts.dataclasses import ParseFailure, ParseOutcome
from app.discounts.logging import add_trace_logging_level_if_not_exists
from app.discounts.pydantic_models import TransactionModel

add_trace_logging_level_if_not_exists()
logger = logging.getLogger(__name__)

_FIELDS = ("date", "package_size", "carrier")


def parse_transaction(line: str) -> ParseOutcome:
    tokens = line.split()
    if len(tokens) != len(_FIELDS):
        logger.trace(  # type: ignore
            "Expected %d fields, got %d: %r", len(_FIELDS), len(tokens), line
        )
        return ParseFailure(line)

    try:
        return TransactionModel.model_validate(dict(zip(_FIELDS, tokens)))
    except ValidationError as e:
        logger.trace(  # type: ignore
            "Invalid transaction %r: %d invalid field(s)",
            line,
            e.error_count(),
        )
        return ParseFailure(line)


def parse_lines(lines: Iterable[str]) -> list[ParseOutcome]:
    """Parse every line, keeping input order (one outcome per line)."""
    outcomes = [parse_transaction(line) for line in lines]
    logger.debug(
        "Parsed %d line(s), %d ignored",
        len(outcomes),
        sum(isinstance(o, ParseFailure) for o in outcomes),
    )
    return outcomes
