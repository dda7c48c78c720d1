"""
Event Discount (EVENT)

Kakao center pricing. Orders with an event type get the event tier's discount
and a recomputed total price; orders without one keep both prices. Every
order ships at the base cost less 20%.

Unknown event types get no discount, but their total price is still
recomputed as unit price x quantity.
"""

from decimal import Decimal

from shared.pricing import PriceAdjustment
from .center_type import CenterType


class EventDiscount(PriceAdjustment):
    """Event discount - 10% new member, 5% repurchase, 20% VIP, shipping x0.8."""

    # Identity
    name = "EVENT"
    center_type = CenterType.EVENT_DISCOUNT

    # Pricing (discount keyed on event type)
    rate_field = "event_type"
    rates = {
        "신규가입": Decimal("0.10"),    # New member
        "재구매": Decimal("0.05"),      # Repurchase
        "VIP": Decimal("0.20"),
    }
    is_discount = True
    shipping_multiplier = Decimal("0.8")

    @classmethod
    def conditions(cls, order) -> bool:
        return bool(order.event_type)
