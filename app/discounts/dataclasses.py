from dataclasses import dataclass

from app.discounts.pydantic_models import TransactionModel


@dataclass(frozen=True)
class ParseFailure:
    """Input line that could not be parsed. The line is kept as is, since it
    is echoed back in the output."""

    raw: str


ParseOutcome = TransactionModel | ParseFailure
