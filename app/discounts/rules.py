"""Contains discount rules implementations.

There is one rule per package size. Each rule receives the context built
for a transaction and returns the transaction with its reduced price and
discount. Rules never spend more than the context's available budget, but
they don't debit it either: keeping the budget is up to the caller.
"""
import logging
from decimal import Decimal

from app.discounts.context import FREE_LARGE_CARRIER
from app.discounts.logging import add_trace_logging_level_if_not_exists
from app.discounts.protocols import SupportsDiscountApply, SupportsPriceLookup
from app.discounts.pydantic_models import (
    DiscountedTransactionModel,
    LargePackageContext,
    MediumPackageContext,
    SmallPackageContext,
)
from app.discounts.pydantic_types import PackageSize

RULE_NOT_APPLIED = "Rule is not applied:"

add_trace_logging_level_if_not_exists()


logger = logging.getLogger(__name__)


class _PackageRule:
    def __init__(self, catalog: SupportsPriceLookup):
        self._catalog = catalog
        self._logger = logging.getLogger(f"{__name__}.{self.__str__()}")
        self._logger.info("Initiated class: %s", repr(self))

    def __repr__(self):
        return "{}()".format(self.__class__.__name__)

    def __str__(self):
        return self.__class__.__name__


class SmallPackageRule(_PackageRule, SupportsDiscountApply):
    """Cover the difference between the carrier's price and the lowest price
    among carriers for small packages, so small packages cost the same with
    every carrier as long as budget lasts."""

    def apply_rule(
        self, context: SmallPackageContext
    ) -> DiscountedTransactionModel:
        price = self._catalog.base_price(context.carrier, context.package_size)
        lowest_price = self._catalog.best_price(context.package_size)
        covered = min(context.available_budget, price - lowest_price)

        if covered < price - lowest_price:
            self._logger.debug(
                "Discount reduced to available budget %s",
                context.available_budget,
            )
        return DiscountedTransactionModel(
            date=context.date,
            package_size=context.package_size,
            carrier=context.carrier,
            reduced_price=price - covered,
            discount=covered,
        )


class MediumPackageRule(_PackageRule, SupportsDiscountApply):
    """Medium packages are never discounted."""

    def apply_rule(
        self, context: MediumPackageContext
    ) -> DiscountedTransactionModel:
        price = self._catalog.base_price(context.carrier, context.package_size)
        return DiscountedTransactionModel(
            date=context.date,
            package_size=context.package_size,
            carrier=context.carrier,
            reduced_price=price,
            discount=Decimal("0"),
        )


class LargePackageRule(_PackageRule, SupportsDiscountApply):
    """Make the N-th large La Poste shipment of a month free, as far as the
    month's budget allows"""

    def __init__(self, catalog: SupportsPriceLookup, n: int = 3):
        """Initializes class instance based on provided parameters

        Args:
            catalog: shipping prices
            n: which large La Poste shipment of the month is free (n=3 makes
               the third one free). Later shipments of the same month are
               not discounted.
        """
        if n <= 0:
            raise ValueError("expected positive number.")
        self._n = n
        super().__init__(catalog)

    def __repr__(self):
        return "{}(n={})".format(self.__class__.__name__, repr(self._n))

    def __str__(self):
        return "{}(n={})".format(self.__class__.__name__, str(self._n))

    def apply_rule(
        self, context: LargePackageContext
    ) -> DiscountedTransactionModel:
        price = self._catalog.base_price(context.carrier, context.package_size)
        covered = Decimal("0")

        if self._is_free_shipment(context):
            covered = min(context.available_budget, price)
            self._logger.trace(  # type: ignore
                "Rule met all requirements for a free shipping."
                " Covered %s of %s",
                covered,
                price,
            )

        return DiscountedTransactionModel(
            date=context.date,
            package_size=context.package_size,
            carrier=context.carrier,
            reduced_price=price - covered,
            discount=covered,
        )

    def _is_free_shipment(self, context: LargePackageContext) -> bool:
        if (
            context.carrier != FREE_LARGE_CARRIER
            or context.package_size != PackageSize.LARGE
        ):
            self._logger.trace(  # type: ignore
                "%s only large %s shipments are free",
                RULE_NOT_APPLIED,
                FREE_LARGE_CARRIER.value,
            )
            return False
        if context.prior_large_count != self._n - 1:
            self._logger.trace(  # type: ignore
                (
                    "%s discount is applied on transaction %d of the month,"
                    " but this transaction is %d transaction"
                ),
                RULE_NOT_APPLIED,
                self._n,
                context.prior_large_count + 1,
            )
            return False
        return True
