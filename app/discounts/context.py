import logging
from decimal import Decimal
from typing import Sequence

from app.discounts.dataclasses import ParseOutcome
from app.discounts.errors import UnsupportedSizeError
from app.discounts.helpers import filter_objects
from app.discounts.protocols import HasTransaction
from app.discounts.pydantic_models import (
    LargePackageContext,
    MediumPackageContext,
    RuleContext,
    SmallPackageContext,
    TransactionModel,
)
from app.discounts.pydantic_types import Carrier, PackageSize

logger = logging.getLogger(__name__)

# Large packages shipped by this carrier are counted for the free shipment
FREE_LARGE_CARRIER = Carrier.LA_POSTE


class ContextBuilder:
    """Collects the facts a discount rule needs about one transaction.

    The builder holds no state: everything it knows about earlier
    transactions comes from the outcomes passed to ``build``.
    """

    def build(
        self,
        index: int,
        transaction: TransactionModel,
        available_budget: Decimal,
        outcomes: Sequence[ParseOutcome],
    ) -> RuleContext:
        """Build discount rule context for a transaction.

        Args:
            index: position of the transaction in ``outcomes``
            transaction: the transaction
            available_budget: discount budget left in the transaction's month
            outcomes: every parsed line of the batch, in input order

        Raises:
            UnsupportedSizeError: if the package size has no context
        """
        common = {
            "date": transaction.date,
            "carrier": transaction.carrier,
            "available_budget": available_budget,
        }
        match transaction.package_size:
            case PackageSize.SMALL:
                return SmallPackageContext(**common)
            case PackageSize.MEDIUM:
                return MediumPackageContext(**common)
            case PackageSize.LARGE:
                return LargePackageContext(
                    prior_large_count=count_prior_large(
                        index, transaction, outcomes
                    ),
                    **common,
                )
            case _:
                raise UnsupportedSizeError(
                    f"no context for package size {transaction.package_size!r}"
                )


def count_prior_large(
    index: int,
    transaction: HasTransaction,
    outcomes: Sequence[ParseOutcome],
) -> int:
    """Count large La Poste transactions before ``index`` that fall in the
    same month as ``transaction``.

    Only the month number is compared, so the same month of different years
    counts together.
    """
    prior = [o for o in outcomes[:index] if isinstance(o, TransactionModel)]
    same_month = filter_objects(
        prior,
        date=lambda d: d.month == transaction.date.month,
        carrier=FREE_LARGE_CARRIER,
        package_size=PackageSize.LARGE,
    )
    return len(same_month)
