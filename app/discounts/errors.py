"""Exceptions raised by the discount pipeline.

Malformed input lines are not errors here: the parser returns them as
``ParseFailure`` values. The exceptions below signal programming errors
(an impossible enum value or price table lookup) and are never recovered.
"""


class DiscountError(Exception):
    """Base error for this package."""


class InvalidCombinationError(DiscountError, LookupError):
    """Raised when a price is requested for an unknown carrier and package
    size pair."""


class UnsupportedSizeError(DiscountError, ValueError):
    """Raised when a package size has no context or discount rule."""
