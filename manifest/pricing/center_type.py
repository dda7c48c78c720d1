"""
Center Types

Which processing path a distribution center uses. Resolved once at the
entry point from a free-form selector string.
"""

from enum import Enum

from ..data.reference import REGIONAL_SURCHARGE_NAMES, EVENT_DISCOUNT_NAMES


class CenterType(Enum):
    STANDARD = "standard"
    REGIONAL_SURCHARGE = "regional_surcharge"
    EVENT_DISCOUNT = "event_discount"


def resolve_center_type(value: str | CenterType | None) -> CenterType:
    """
    Resolve a center-type selector.

    Names are compared case-insensitively against the special center names;
    anything unrecognized (including None) is STANDARD.
    """
    if isinstance(value, CenterType):
        return value
    if not value:
        return CenterType.STANDARD

    name = value.lower()
    if name in REGIONAL_SURCHARGE_NAMES:
        return CenterType.REGIONAL_SURCHARGE
    if name in EVENT_DISCOUNT_NAMES:
        return CenterType.EVENT_DISCOUNT
    return CenterType.STANDARD
