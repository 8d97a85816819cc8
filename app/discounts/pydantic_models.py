from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from app.discounts.pydantic_types import (
    Amount,
    Carrier,
    PackageSize,
    Price,
    PriorCount,
    TransactionDate,
)


class ShippingPlanModel(BaseModel):
    """Price table row: shipping price of a package size by a carrier."""

    model_config = ConfigDict(frozen=True)

    carrier: Carrier
    package_size: PackageSize
    price: Price


class TransactionModel(BaseModel):
    """Successfully parsed transaction line."""

    model_config = ConfigDict(frozen=True)

    date: TransactionDate
    package_size: PackageSize
    carrier: Carrier


class DiscountedTransactionModel(BaseModel):
    """Transaction with its price after discount and the discount itself.

    Attributes:
      reduced_price: price left to pay after the discount
      discount: amount covered from the month's discount budget
    """

    model_config = ConfigDict(frozen=True)

    date: TransactionDate
    package_size: PackageSize
    carrier: Carrier
    reduced_price: Amount
    discount: Amount


class _BaseContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: TransactionDate
    carrier: Carrier
    available_budget: Amount


class SmallPackageContext(_BaseContext):
    package_size: Literal[PackageSize.SMALL] = PackageSize.SMALL


class MediumPackageContext(_BaseContext):
    package_size: Literal[PackageSize.MEDIUM] = PackageSize.MEDIUM


class LargePackageContext(_BaseContext):
    """Context of a large package.

    Attributes:
      prior_large_count: number of large La Poste transactions earlier in the
                         batch within the same month (current one excluded)
    """

    package_size: Literal[PackageSize.LARGE] = PackageSize.LARGE
    prior_large_count: PriorCount


RuleContext = Annotated[
    SmallPackageContext | MediumPackageContext | LargePackageContext,
    Field(discriminator="package_size"),
]
