"""
Reference Data

Static configuration for star marking, consolidation and special centers.
"""

from .star_keywords import STAR_KEYWORDS, STAR_MARKER
from .consolidation import (
    MIN_GROUP_SIZE,
    ORDER_NUMBER_SUFFIX,
    PRODUCT_NAME_TEMPLATE,
    SPECIAL_NOTE_SEPARATOR,
)
from .centers import REGIONAL_SURCHARGE_NAMES, EVENT_DISCOUNT_NAMES

__all__ = [
    "STAR_KEYWORDS",
    "STAR_MARKER",
    "MIN_GROUP_SIZE",
    "ORDER_NUMBER_SUFFIX",
    "PRODUCT_NAME_TEMPLATE",
    "SPECIAL_NOTE_SEPARATOR",
    "REGIONAL_SURCHARGE_NAMES",
    "EVENT_DISCOUNT_NAMES",
]
