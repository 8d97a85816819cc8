from datetime import date
from decimal import Decimal

from app.discounts.dataclasses import ParseFailure
from app.discounts.output import format_result, format_results
from app.discounts.pydantic_models import DiscountedTransactionModel
from app.discounts.pydantic_types import Carrier, PackageSize


def _discounted(reduced_price, discount):
    return DiscountedTransactionModel(
        date=date(2015, 2, 1),
        package_size=PackageSize.SMALL,
        carrier=Carrier.MONDIAL_RELAY,
        reduced_price=Decimal(reduced_price),
        discount=Decimal(discount),
    )


def test_format_discounted_transaction():
    result = _discounted("1.5", "0.5")

    assert format_result(result) == "2015-02-01 S MR 1.50 0.50"


def test_format_zero_discount_as_dash():
    assert format_result(_discounted("2", "0.00")) == "2015-02-01 S MR 2.00 -"


def test_format_free_shipment():
    result = _discounted("0", "6.9")

    assert format_result(result) == "2015-02-01 S MR 0.00 6.90"


def test_format_failure():
    assert format_result(ParseFailure("bad line")) == "bad line Ignored"


def test_format_results_keeps_order():
    results = [ParseFailure("x"), _discounted("1.50", "0.50")]

    assert format_results(results) == [
        "x Ignored",
        "2015-02-01 S MR 1.50 0.50",
    ]
