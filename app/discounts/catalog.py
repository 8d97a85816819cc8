"""Shipping price table.

Holds the base price of every carrier and package size combination and
answers which carrier ships a package size the cheapest.
"""
import logging
from decimal import Decimal
from typing import Any, Iterable, Mapping

from pydantic import TypeAdapter

from app.discounts.errors import InvalidCombinationError
from app.discounts.helpers import filter_objects, find, load_data
from app.discounts.protocols import HasShippingPlan
from app.discounts.pydantic_models import ShippingPlanModel
from app.discounts.pydantic_types import Carrier, PackageSize

logger = logging.getLogger(__name__)

DEFAULT_SHIPPING_PLANS: tuple[Mapping[str, Any], ...] = (
    {"carrier": "LP", "package_size": "S", "price": "1.50"},
    {"carrier": "LP", "package_size": "M", "price": "4.90"},
    {"carrier": "LP", "package_size": "L", "price": "6.90"},
    {"carrier": "MR", "package_size": "S", "price": "2.00"},
    {"carrier": "MR", "package_size": "M", "price": "3.00"},
    {"carrier": "MR", "package_size": "L", "price": "4.00"},
)


class PriceCatalog:
    """Base prices per carrier and package size."""

    def __init__(
        self,
        shipping_plans: Iterable[
            ShippingPlanModel | Mapping[str, Any]
        ] = DEFAULT_SHIPPING_PLANS,
    ):
        """Initialize object based on provided shipping plans

        Args:
            shipping_plans: one price per carrier and package size pair.
                            Mappings with keys 'carrier', 'package_size' and
                            'price' are accepted as well.

        Raises:
            ValueError: if a carrier and package size pair is priced twice
                        or is not priced at all
        """
        self._shipping_plans = _initialize_shipping_plans(shipping_plans)
        _validate_price_table(self._shipping_plans)
        logger.debug(
            "Loaded price table with %d entries", len(self._shipping_plans)
        )

    def __repr__(self):
        return "{}({})".format(
            self.__class__.__name__,
            ",".join(
                f"{p.carrier.value}/{p.package_size.value}={p.price}"
                for p in self._shipping_plans
            ),
        )

    def base_price(
        self, carrier: Carrier, package_size: PackageSize
    ) -> Decimal:
        try:
            plan = find(
                self._shipping_plans,
                carrier=carrier,
                package_size=package_size,
            )
        except LookupError as e:
            raise InvalidCombinationError(
                f"no price for carrier {carrier!r} and size {package_size!r}"
            ) from e
        return plan.price

    def best_price(self, package_size: PackageSize) -> Decimal:
        """Lowest price any carrier asks for shipping the package size."""
        plans = filter_objects(self._shipping_plans, package_size=package_size)
        if not plans:
            raise InvalidCombinationError(
                f"no carrier ships package size {package_size!r}"
            )
        return min(plan.price for plan in plans)


def load_shipping_plans(file: str) -> list[ShippingPlanModel]:
    """Read shipping plans from a JSON file.

    The file holds a list of objects with keys 'carrier', 'package_size' and
    'price'. Prices must be JSON strings (e.g. "1.50").
    """
    data = load_data(file)
    if not isinstance(data, list):
        raise ValueError(
            f"shipping plans must be a JSON list not {type(data).__name__}"
        )
    return _initialize_shipping_plans(data)


def _initialize_shipping_plans(
    shipping_plans: Iterable[ShippingPlanModel | Mapping[str, Any]]
) -> list[ShippingPlanModel]:
    return TypeAdapter(list[ShippingPlanModel]).validate_python(
        list(shipping_plans)
    )


def _validate_price_table(shipping_plans: Iterable[HasShippingPlan]) -> None:
    seen: set[tuple[Carrier, PackageSize]] = set()
    for plan in shipping_plans:
        key = (plan.carrier, plan.package_size)
        if key in seen:
            raise ValueError(
                (
                    f"carrier {plan.carrier.value!r} has more than one price"
                    f" for package size {plan.package_size.value!r}"
                )
            )
        seen.add(key)

    missing = [
        f"{carrier.value}/{size.value}"
        for carrier in Carrier
        for size in PackageSize
        if (carrier, size) not in seen
    ]
    if missing:
        raise ValueError(f"price table is missing: {', '.join(missing)}")
