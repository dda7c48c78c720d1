"""
Classify Orders

Splits orders into individual items and boxed items.
"""

from ..order import Order


def classify(orders: list[Order]) -> tuple[list[Order], list[Order]]:
    """
    Partition valid orders into individual and boxed items.

    Invalid orders (see Order.is_valid) are dropped without error.
    Input order is preserved within each list.

    Returns:
        (individual, boxed)
    """
    individual = []
    boxed = []

    for order in orders:
        if not order.is_valid():
            continue
        if order.is_boxed():
            boxed.append(order)
        else:
            individual.append(order)

    return individual, boxed
