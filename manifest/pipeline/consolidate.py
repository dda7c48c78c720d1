"""
Consolidate Individual Items

Individual items for the same recipient (name + address) ship under one
consolidated invoice.

CONSOLIDATED INVOICE
--------------------
    order_number    - first member's order number + ORDER_NUMBER_SUFFIX
    product_name    - PRODUCT_NAME_TEMPLATE with the member count
    quantity        - sum of member quantities
    total_price     - sum of member total prices (exact)
    unit_price      - total_price / quantity (average, not a weighted unit price)
    special_note    - member product names, joined in group order
    shipping_cost   - the center's shipping cost
    everything else - copied from the first member

Groups are formed in first-encountered order, so "first member" is the
earliest item in the input. A group whose quantities sum to zero or less is
not consolidated; its result carries a skipped_reason and its members stay
individual.
"""

from dataclasses import replace
from decimal import Decimal
from typing import NamedTuple

from ..order import Order, RecipientKey
from ..data.reference import (
    MIN_GROUP_SIZE,
    ORDER_NUMBER_SUFFIX,
    PRODUCT_NAME_TEMPLATE,
    SPECIAL_NOTE_SEPARATOR,
)


class ConsolidationResult(NamedTuple):
    """Outcome for one recipient group: an invoice, or the reason it was skipped."""
    key: RecipientKey
    members: list[Order]
    invoice: Order | None
    skipped_reason: str | None = None


def group_by_recipient(orders: list[Order]) -> dict[RecipientKey, list[Order]]:
    """Group orders by recipient key, keys and members in input order."""
    groups: dict[RecipientKey, list[Order]] = {}
    for order in orders:
        groups.setdefault(order.recipient_key(), []).append(order)
    return groups


def consolidate(
    individual: list[Order],
    shipping_cost: Decimal
) -> list[ConsolidationResult]:
    """
    Build consolidated invoices for recipients with several individual items.

    Args:
        individual: Individual (non-boxed) items from classify()
        shipping_cost: Shipping cost stamped on every consolidated invoice

    Returns:
        One result per group of MIN_GROUP_SIZE or more items, in group order.
        Single-item groups produce nothing.
    """
    results = []

    for key, members in group_by_recipient(individual).items():
        if len(members) < MIN_GROUP_SIZE:
            continue
        results.append(_consolidate_group(key, members, shipping_cost))

    return results


def _consolidate_group(
    key: RecipientKey,
    members: list[Order],
    shipping_cost: Decimal
) -> ConsolidationResult:
    """Build the invoice for one group, or skip it if its quantity is not positive."""
    quantity = sum(member.quantity for member in members)
    if quantity <= 0:
        return ConsolidationResult(
            key=key,
            members=members,
            invoice=None,
            skipped_reason=f"total quantity is {quantity}",
        )

    total_price = sum((member.total_price for member in members), Decimal("0"))
    first = members[0]

    invoice = replace(
        first,
        order_number=f"{first.order_number}{ORDER_NUMBER_SUFFIX}",
        product_name=PRODUCT_NAME_TEMPLATE.format(count=len(members)),
        quantity=quantity,
        unit_price=total_price / quantity,
        total_price=total_price,
        shipping_cost=shipping_cost,
        special_note=SPECIAL_NOTE_SEPARATOR.join(m.product_name for m in members),
    )

    return ConsolidationResult(key=key, members=members, invoice=invoice)
