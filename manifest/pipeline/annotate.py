"""
Star Marking

Flags dwelling-type delivery addresses (apartments, villas, ...) by appending
STAR_MARKER to the address.

NOT IDEMPOTENT
--------------
A marked address still contains its keyword, so annotating it again appends
a second marker. Callers annotate each order exactly once.
"""

from dataclasses import replace

from ..order import Order
from ..data.reference import STAR_KEYWORDS, STAR_MARKER


def needs_star(order: Order) -> bool:
    """True if the address is non-empty and contains a dwelling keyword."""
    if not order.address:
        return False
    return any(keyword in order.address for keyword in STAR_KEYWORDS)


def annotate_addresses(orders: list[Order]) -> list[Order]:
    """Return the orders with matching addresses star marked, same order."""
    return [
        replace(order, address=f"{order.address}{STAR_MARKER}")
        if needs_star(order) else order
        for order in orders
    ]
