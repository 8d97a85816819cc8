import logging
from decimal import Decimal
from typing import Iterable, Sequence

from pydantic import validate_call

from app.discounts.catalog import PriceCatalog
from app.discounts.context import ContextBuilder
from app.discounts.dataclasses import ParseFailure, ParseOutcome
from app.discounts.errors import UnsupportedSizeError
from app.discounts.parser import parse_lines
from app.discounts.protocols import SupportsDiscountApply, SupportsPriceLookup
from app.discounts.pydantic_models import (
    DiscountedTransactionModel,
    LargePackageContext,
    MediumPackageContext,
    RuleContext,
    SmallPackageContext,
    TransactionModel,
)
from app.discounts.pydantic_types import Budget
from app.discounts.rules import (
    LargePackageRule,
    MediumPackageRule,
    SmallPackageRule,
)

MONTHLY_DISCOUNT_BUDGET = Decimal("10.00")

logger = logging.getLogger(__name__)

DiscountOutcome = DiscountedTransactionModel | ParseFailure


class DiscountProcessor:
    """Determines discount size and shipping's final price for a batch of
    transactions"""

    @validate_call(config={"arbitrary_types_allowed": True})
    def __init__(
        self,
        monthly_budget: Budget = MONTHLY_DISCOUNT_BUDGET,
        catalog: SupportsPriceLookup | None = None,
        small_package_rule: SupportsDiscountApply | None = None,
        medium_package_rule: SupportsDiscountApply | None = None,
        large_package_rule: SupportsDiscountApply | None = None,
        context_builder: ContextBuilder | None = None,
    ):
        """Initialize object based on provided parameters

        Args:
            monthly_budget: total discount that may be given out each month
            catalog: shipping prices used by the default rules
            small_package_rule: replaces the default small package rule
            medium_package_rule: replaces the default medium package rule
            large_package_rule: replaces the default large package rule
            context_builder: replaces the default context builder
        """
        catalog = catalog if catalog is not None else PriceCatalog()
        self._monthly_budget = monthly_budget
        self._small_package_rule = small_package_rule or SmallPackageRule(
            catalog
        )
        self._medium_package_rule = medium_package_rule or MediumPackageRule(
            catalog
        )
        self._large_package_rule = large_package_rule or LargePackageRule(
            catalog
        )
        self._context_builder = context_builder or ContextBuilder()

    def apply(self, outcomes: Iterable[ParseOutcome]) -> list[DiscountOutcome]:
        """Apply discounts to parsed transactions.

        Transactions are processed in the given order: each discount is
        debited from its month's budget before the next transaction is
        looked at, so earlier transactions get budget first.

        Args:
            outcomes: parsed transaction lines. Parse failures are passed
                      through as they are.

        Returns:
            One entry per outcome, in the same order: the discounted
            transaction, or the parse failure.
        """
        outcomes = list(outcomes)
        budget_pool = build_budget_pool(outcomes, self._monthly_budget)

        results: list[DiscountOutcome] = []
        for index, outcome in enumerate(outcomes):
            if isinstance(outcome, ParseFailure):
                logger.debug("Ignoring line %d: %r", index, outcome.raw)
                results.append(outcome)
                continue
            discounted = self._process_transaction(
                index, outcome, outcomes, budget_pool
            )
            results.append(discounted)
        return results

    def process_lines(self, lines: Iterable[str]) -> list[DiscountOutcome]:
        """Parse transaction lines and apply discounts to them."""
        return self.apply(parse_lines(lines))

    def _process_transaction(
        self,
        index: int,
        transaction: TransactionModel,
        outcomes: Sequence[ParseOutcome],
        budget_pool: dict[int, Decimal],
    ) -> DiscountedTransactionModel:
        logger.debug("Processing transaction: %s", repr(transaction))
        month = transaction.date.month
        context = self._context_builder.build(
            index, transaction, budget_pool[month], outcomes
        )
        discounted = self._apply_rule(context)
        budget_pool[month] -= discounted.discount
        if discounted.discount > 0:
            logger.debug(
                "Applied discount %s, budget left for month %d: %s",
                discounted.discount,
                month,
                budget_pool[month],
            )
        return discounted

    def _apply_rule(self, context: RuleContext) -> DiscountedTransactionModel:
        match context:
            case SmallPackageContext():
                return self._small_package_rule.apply_rule(context)
            case MediumPackageContext():
                return self._medium_package_rule.apply_rule(context)
            case LargePackageContext():
                return self._large_package_rule.apply_rule(context)
            case _:
                raise UnsupportedSizeError(
                    f"no discount rule for context {context!r}"
                )


def build_budget_pool(
    outcomes: Iterable[ParseOutcome], monthly_budget: Decimal
) -> dict[int, Decimal]:
    """Give every month present among parsed transactions the full budget.

    Months are keyed by number only: January 2015 and January 2016 share
    one budget.
    """
    return {
        outcome.date.month: monthly_budget
        for outcome in outcomes
        if isinstance(outcome, TransactionModel)
    }
