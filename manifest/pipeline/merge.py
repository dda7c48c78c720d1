"""
Merge Final Manifest

Assembles boxed items, consolidated invoices and the remaining individual
items into the final manifest.
"""

from ..order import Order


def merge(
    individual: list[Order],
    boxed: list[Order],
    consolidated: list[Order]
) -> list[Order]:
    """
    Build the final manifest.

    Order of output:
        1. All boxed items
        2. All consolidated invoices
        3. Individual items whose recipient key matches no consolidated invoice

    Suppression is by key, not by group membership: every individual item
    sharing a consolidated invoice's (recipient_name, address) is left out.
    """
    consolidated_keys = {invoice.recipient_key() for invoice in consolidated}

    remaining = [
        order for order in individual
        if order.recipient_key() not in consolidated_keys
    ]

    return [*boxed, *consolidated, *remaining]
