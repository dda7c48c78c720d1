"""
Shared Pricing

Base class and utilities for center price adjustments.
"""

from .base import PriceAdjustment, to_decimal

__all__ = [
    "PriceAdjustment",
    "to_decimal",
]
