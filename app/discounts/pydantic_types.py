from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import BeforeValidator, Field

from app.discounts.cast import cast_to_date, cast_to_decimal


class PackageSize(str, Enum):
    """Package size. Member values are the short codes used in transaction
    lines, so ``PackageSize("S")`` and ``PackageSize.SMALL.value`` translate
    both ways."""

    SMALL = "S"
    MEDIUM = "M"
    LARGE = "L"


class Carrier(str, Enum):
    """Shipping carrier, valued by its short code."""

    LA_POSTE = "LP"
    MONDIAL_RELAY = "MR"


# Alias must match mapping key names (e.g json parsed dictionary's key names)
TransactionDate = Annotated[
    date, BeforeValidator(cast_to_date), Field(alias="date")
]
Price = Annotated[
    Decimal, BeforeValidator(cast_to_decimal), Field(gt=0, alias="price")
]
Amount = Annotated[Decimal, Field(ge=0)]
Budget = Annotated[
    Decimal, BeforeValidator(cast_to_decimal), Field(ge=0, decimal_places=2)
]
PriorCount = Annotated[int, Field(ge=0)]
