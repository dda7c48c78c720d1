"""
Manifest Data

Reference configuration and loaders.

Structure:
    - reference/: Static configuration (star keywords, consolidation, centers)
    - loaders/: Order CSV loader and manifest writer
"""

from .reference import (
    STAR_KEYWORDS,
    STAR_MARKER,
    MIN_GROUP_SIZE,
    ORDER_NUMBER_SUFFIX,
    PRODUCT_NAME_TEMPLATE,
    SPECIAL_NOTE_SEPARATOR,
    REGIONAL_SURCHARGE_NAMES,
    EVENT_DISCOUNT_NAMES,
)

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
