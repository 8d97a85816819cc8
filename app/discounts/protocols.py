from datetime import date
from decimal import Decimal
from typing import Protocol, runtime_checkable

from app.discounts.pydantic_models import DiscountedTransactionModel
from app.discounts.pydantic_types import Carrier, PackageSize


@runtime_checkable
class HasShippingPlan(Protocol):
    carrier: Carrier
    package_size: PackageSize
    price: Decimal


@runtime_checkable
class HasTransaction(Protocol):
    date: date
    carrier: Carrier
    package_size: PackageSize


@runtime_checkable
class SupportsPriceLookup(Protocol):
    """Price catalogs implement this protocol"""

    def base_price(
        self, carrier: Carrier, package_size: PackageSize
    ) -> Decimal:
        ...

    def best_price(self, package_size: PackageSize) -> Decimal:
        ...


@runtime_checkable
class SupportsDiscountApply(Protocol):
    """Every discount rule implements this protocol"""

    def apply_rule(self, context) -> DiscountedTransactionModel:
        """Calculates discount (if any) for the context's transaction

        Args:
            context: transaction details along with available budget and,
                     depending on the package size, facts about earlier
                     transactions

        Returns:
            DiscountedTransactionModel: transaction with reduced price and
                                        discount size
        """
        ...
