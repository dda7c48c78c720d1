"""
Pricing Package

Exports the special-center price adjustments and the adjuster that applies
them.

Each special CenterType maps to exactly one adjustment. STANDARD has none:
standard centers go through classify/consolidate/annotate/merge instead.
"""

from decimal import Decimal

from shared.pricing import PriceAdjustment
from ..order import Order
from .center_type import CenterType, resolve_center_type
from .regional_surcharge import RegionalSurcharge
from .event_discount import EventDiscount


# All adjustments
ALL = [RegionalSurcharge, EventDiscount]


# =============================================================================
# HELPERS
# =============================================================================

def get_by_center_type(center_type: CenterType) -> type[PriceAdjustment] | None:
    """Adjustment for a center type, or None for STANDARD."""
    for adjustment in ALL:
        if adjustment.center_type == center_type:
            return adjustment
    return None


def adjust_prices(
    orders: list[Order],
    adjustment: type[PriceAdjustment],
    shipping_cost: Decimal
) -> list[Order]:
    """
    Re-price every valid order with a special-center adjustment.

    Invalid orders are dropped without error. No classification,
    consolidation or star marking takes place; each valid order appears
    exactly once, in input order.
    """
    return [
        adjustment.apply(order, shipping_cost)
        for order in orders
        if order.is_valid()
    ]


# =============================================================================
# VALIDATION
# =============================================================================

def validate_adjustments() -> None:
    """
    Validate adjustment configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []
    seen = {}

    for a in ALL:
        # One adjustment per special center type
        if a.center_type == CenterType.STANDARD:
            errors.append(f"{a.name}: STANDARD centers take no price adjustment")
        elif a.center_type in seen:
            errors.append(
                f"{a.name}: center type {a.center_type.name} already used by {seen[a.center_type]}"
            )
        seen[a.center_type] = a.name

        # Rates are fractions
        for key, rate in a.rates.items():
            if not Decimal("0") <= rate < Decimal("1"):
                errors.append(f"{a.name}: rate for '{key}' must be in [0, 1), got {rate}")

        if a.shipping_multiplier <= 0:
            errors.append(f"{a.name}: shipping_multiplier must be positive")

    if errors:
        raise ValueError("Price adjustment configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_adjustments()

__all__ = [
    # Base
    "PriceAdjustment",
    # Center types
    "CenterType",
    "resolve_center_type",
    # Adjustment classes
    "RegionalSurcharge",
    "EventDiscount",
    # Lists
    "ALL",
    # Helpers
    "get_by_center_type",
    "adjust_prices",
]
