"""
Regional Surcharge (REGIONAL)

Gamcheon center pricing. Unit price is raised by the destination region's
rate and total price recomputed for every order; shipping cost is the base
cost plus 20%.

Region names match exactly. Regions without a rate keep their unit price
(total price is still recomputed as unit price x quantity).
"""

from decimal import Decimal

from shared.pricing import PriceAdjustment
from .center_type import CenterType


class RegionalSurcharge(PriceAdjustment):
    """Regional surcharge - +10% Busan, +5% Gyeongnam, shipping x1.2."""

    # Identity
    name = "REGIONAL"
    center_type = CenterType.REGIONAL_SURCHARGE

    # Pricing (surcharge keyed on region)
    rate_field = "region"
    rates = {
        "부산": Decimal("0.10"),    # Busan
        "경남": Decimal("0.05"),    # Gyeongnam
    }
    is_discount = False
    shipping_multiplier = Decimal("1.2")

    # Uses default conditions() -> every order is re-priced
