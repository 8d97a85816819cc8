from datetime import date
from decimal import Decimal

import pytest

from app.discounts.catalog import PriceCatalog
from app.discounts.pydantic_models import (
    LargePackageContext,
    MediumPackageContext,
    SmallPackageContext,
)
from app.discounts.pydantic_types import Carrier, PackageSize
from app.discounts.rules import (
    LargePackageRule,
    MediumPackageRule,
    SmallPackageRule,
)

DAY = date(2024, 1, 1)


@pytest.fixture
def catalog():
    return PriceCatalog()


@pytest.mark.parametrize(
    "carrier, budget, reduced_price, discount",
    [
        (Carrier.MONDIAL_RELAY, "10.00", "1.50", "0.50"),
        (Carrier.MONDIAL_RELAY, "0.20", "1.80", "0.20"),
        (Carrier.MONDIAL_RELAY, "0", "2.00", "0"),
        (Carrier.LA_POSTE, "10.00", "1.50", "0"),
    ],
)
def test_small_package_rule(catalog, carrier, budget, reduced_price, discount):
    context = SmallPackageContext(
        date=DAY, carrier=carrier, available_budget=Decimal(budget)
    )

    result = SmallPackageRule(catalog).apply_rule(context)

    assert result.reduced_price == Decimal(reduced_price)
    assert result.discount == Decimal(discount)
    assert result.reduced_price + result.discount == catalog.base_price(
        carrier, PackageSize.SMALL
    )
    assert result.package_size is PackageSize.SMALL
    assert result.date == DAY


@pytest.mark.parametrize("carrier", list(Carrier))
def test_medium_package_rule_never_discounts(catalog, carrier):
    context = MediumPackageContext(
        date=DAY, carrier=carrier, available_budget=Decimal("10.00")
    )

    result = MediumPackageRule(catalog).apply_rule(context)

    assert result.discount == 0
    assert result.reduced_price == catalog.base_price(
        carrier, PackageSize.MEDIUM
    )


@pytest.mark.parametrize(
    "prior, discount",
    [(0, "0"), (1, "0"), (2, "6.90"), (3, "0"), (7, "0")],
)
def test_large_package_rule_third_shipment_is_free(catalog, prior, discount):
    context = LargePackageContext(
        date=DAY,
        carrier=Carrier.LA_POSTE,
        available_budget=Decimal("10.00"),
        prior_large_count=prior,
    )

    result = LargePackageRule(catalog).apply_rule(context)

    assert result.discount == Decimal(discount)
    assert result.reduced_price == Decimal("6.90") - Decimal(discount)


def test_large_package_rule_capped_by_budget(catalog):
    context = LargePackageContext(
        date=DAY,
        carrier=Carrier.LA_POSTE,
        available_budget=Decimal("2.40"),
        prior_large_count=2,
    )

    result = LargePackageRule(catalog).apply_rule(context)

    assert result.discount == Decimal("2.40")
    assert result.reduced_price == Decimal("4.50")


def test_large_package_rule_only_la_poste(catalog):
    context = LargePackageContext(
        date=DAY,
        carrier=Carrier.MONDIAL_RELAY,
        available_budget=Decimal("10.00"),
        prior_large_count=2,
    )

    result = LargePackageRule(catalog).apply_rule(context)

    assert result.discount == 0
    assert result.reduced_price == Decimal("4.00")


def test_large_package_rule_custom_n(catalog):
    rule = LargePackageRule(catalog, n=1)
    context = LargePackageContext(
        date=DAY,
        carrier=Carrier.LA_POSTE,
        available_budget=Decimal("10.00"),
        prior_large_count=0,
    )

    assert rule.apply_rule(context).discount == Decimal("6.90")
    assert repr(rule) == "LargePackageRule(n=1)"


def test_large_package_rule_requires_positive_n(catalog):
    with pytest.raises(ValueError):
        LargePackageRule(catalog, n=0)
