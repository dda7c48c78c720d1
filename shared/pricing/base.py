"""
Price Adjustment Base Class

Shared base class for center-specific price and shipping-cost adjustments.
"""

from abc import ABC
from dataclasses import replace
from decimal import Decimal
from enum import Enum


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def to_decimal(value) -> Decimal:
    """
    Convert a money amount to Decimal without going through binary floats.

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Decimal equal to the printed value (1.2 -> Decimal("1.2"))

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except ArithmeticError:
            raise ValueError(f"Not a valid amount: {value!r}")

    if not result.is_finite():
        raise ValueError(f"Not a valid amount: {value!r}")
    return result


# =============================================================================
# BASE CLASS
# =============================================================================

class PriceAdjustment(ABC):
    """
    Base class for all price adjustments.

    Attributes:
        IDENTITY
            name                - Short code (e.g., "REGIONAL", "EVENT")
            center_type         - Center type this adjustment is selected for

        PRICING
            rate_field          - Order field the rate table is keyed on
            rates               - {field value: rate} (0.10 = 10%)
            is_discount         - True if rates lower the unit price
            shipping_multiplier - Factor applied to the base shipping cost
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str
    center_type: Enum

    # -------------------------------------------------------------------------
    # PRICING
    # -------------------------------------------------------------------------
    rate_field: str
    rates: dict[str, Decimal]
    is_discount: bool = False
    shipping_multiplier: Decimal = Decimal("1")

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def price_multiplier(cls, key: str) -> Decimal:
        """Unit price multiplier for a rate key (1 if the key has no rate)."""
        rate = cls.rates.get(key)
        if rate is None:
            return Decimal("1")
        return Decimal("1") - rate if cls.is_discount else Decimal("1") + rate

    @classmethod
    def conditions(cls, order) -> bool:
        """
        Whether the unit and total price of this order are recomputed.

        Default returns True (every order is re-priced).
        Override to leave some orders at their original price.
        """
        return True

    @classmethod
    def unit_price(cls, order) -> Decimal:
        """Adjusted unit price for an order."""
        return order.unit_price * cls.price_multiplier(getattr(order, cls.rate_field))

    @classmethod
    def shipping_cost(cls, base_shipping_cost: Decimal) -> Decimal:
        """Shipping cost charged by this center."""
        return base_shipping_cost * cls.shipping_multiplier

    @classmethod
    def apply(cls, order, base_shipping_cost: Decimal):
        """
        Return a re-priced copy of an order.

        Total price is recomputed as unit price x quantity only when
        conditions() holds; shipping cost is always replaced.
        """
        if cls.conditions(order):
            unit_price = cls.unit_price(order)
            order = replace(
                order,
                unit_price=unit_price,
                total_price=unit_price * order.quantity,
            )
        return replace(order, shipping_cost=cls.shipping_cost(base_shipping_cost))
