"""
Shipment Manifest Builder

DataFrame in, DataFrame out. The input can come from any source (order
export CSV, database, manual creation) as long as it contains the order
columns. The output is the final manifest for one distribution center, with
the input's schema (all-null columns are widened, see order.output_schema).

REQUIRED INPUT COLUMNS
----------------------
    See columns.ORDER_COLUMNS (order_number, recipient_name, address,
    product_name, quantity, unit_price, total_price, shipping_cost,
    box_size, event_type, region, ...)

STANDARD RUN
------------
    process() runs, in order:
        1. classify()            - drop invalid rows, split individual / boxed
        2. consolidate()         - one invoice per recipient with 2+ individual items
        3. annotate_addresses()  - star mark individual, boxed and invoices once
        4. merge()               - boxed, invoices, then unconsolidated individuals

SPECIAL RUN
-----------
    process_special_shipment() resolves the center type once:
        - REGIONAL_SURCHARGE / EVENT_DISCOUNT: re-price every valid row, no
          classification, consolidation or star marking
        - anything else: falls back to process()

ERRORS
------
    Invalid rows are dropped silently. Any other failure is reported to the
    progress sink and raised as RuntimeError; no partial manifest is returned.

USAGE
-----
    from manifest.build_manifest import process, process_special_shipment
    manifest = process(df, "Seoul", 3000, progress=print)
"""

from decimal import Decimal
from typing import Mapping

import polars as pl

from shared.pricing import to_decimal
from shared.progress import ProgressSink, notify
from .columns import validate_columns
from .order import Order, orders_from_frame, orders_to_frame
from .pipeline import annotate_addresses, classify, consolidate, merge
from .pricing import CenterType, adjust_prices, get_by_center_type, resolve_center_type


# =============================================================================
# MAIN ENTRY POINTS
# =============================================================================

def process(
    df: pl.DataFrame,
    center_name: str,
    shipping_cost,
    progress: ProgressSink | None = None
) -> pl.DataFrame:
    """
    Build the manifest for a standard center.

    Args:
        df: Order table with the order columns
        center_name: Distribution center name (used in progress messages)
        shipping_cost: Shipping cost for consolidated invoices
        progress: Optional sink for progress messages (e.g. print)

    Returns:
        Manifest table with the same schema as df

    Raises:
        RuntimeError: If processing fails for any reason other than invalid rows
    """
    try:
        orders = orders_from_frame(df)
        manifest = build_manifest(orders, center_name, to_decimal(shipping_cost), progress)
        return orders_to_frame(manifest, df.schema)
    except Exception as e:
        raise _failure(progress, center_name, e) from e


def process_special_shipment(
    df: pl.DataFrame,
    center_name: str,
    shipping_cost,
    special_type: str | CenterType | None,
    progress: ProgressSink | None = None
) -> pl.DataFrame:
    """
    Build the manifest for a center that may use special pricing.

    Args:
        df: Order table with the order columns
        center_name: Distribution center name (used in progress messages)
        shipping_cost: Base shipping cost (scaled by the special center's multiplier)
        special_type: Center-type selector ("감천", "카카오", aliases, or a CenterType)
        progress: Optional sink for progress messages

    Returns:
        Re-priced table for a special center, or the standard manifest

    Raises:
        RuntimeError: If processing fails for any reason other than invalid rows
    """
    notify(progress, f"{center_name}: {_label(special_type)} special processing started...")

    adjustment = get_by_center_type(resolve_center_type(special_type))
    if adjustment is None:
        return process(df, center_name, shipping_cost, progress)

    try:
        orders = orders_from_frame(df)
        adjusted = adjust_prices(orders, adjustment, to_decimal(shipping_cost))
        notify(progress, f"{center_name}: {adjustment.name} pricing applied ({len(adjusted)} rows)")
        return orders_to_frame(adjusted, df.schema)
    except Exception as e:
        raise _failure(progress, center_name, e) from e


def process_centers(
    df: pl.DataFrame,
    shipping_costs: Mapping[str, object],
    special_types: Mapping[str, str | CenterType] | None = None,
    progress: ProgressSink | None = None
) -> dict[str, pl.DataFrame]:
    """
    Split a multi-center order table by shipping_center and build each manifest.

    Args:
        df: Order table covering one or more centers
        shipping_costs: {center name: shipping cost}; every center in df needs one
        special_types: {center name: center-type selector} for special centers
        progress: Optional sink for progress messages

    Returns:
        {center name: manifest}, centers in order of first appearance

    Raises:
        ValueError: If columns are missing or a center has no shipping cost
        RuntimeError: If processing a center fails
    """
    validate_columns(df)
    special_types = special_types or {}
    if df.is_empty():
        return {}

    # Null and "" are the same (unassigned) center
    df = df.with_columns(pl.col("shipping_center").cast(pl.Utf8).fill_null(""))
    parts = df.partition_by("shipping_center", maintain_order=True)
    centers = [part["shipping_center"][0] for part in parts]

    missing = [center for center in centers if center not in shipping_costs]
    if missing:
        raise ValueError(f"No shipping cost configured for center(s): {', '.join(missing)}")

    manifests = {}
    for center, part in zip(centers, parts):
        special_type = special_types.get(center)
        if special_type is None:
            manifests[center] = process(part, center, shipping_costs[center], progress)
        else:
            manifests[center] = process_special_shipment(
                part, center, shipping_costs[center], special_type, progress
            )

    return manifests


# =============================================================================
# STANDARD PIPELINE
# =============================================================================

def build_manifest(
    orders: list[Order],
    center_name: str,
    shipping_cost: Decimal,
    progress: ProgressSink | None = None
) -> list[Order]:
    """
    Run classify -> consolidate -> annotate -> merge on a list of orders.

    Progress is reported at start and after each step. Consolidation groups
    that cannot be consolidated (non-positive total quantity) are reported
    and their items stay individual.
    """
    notify(progress, f"{center_name}: processing started...")

    # Step 1: Split into individual and boxed items
    individual, boxed = classify(orders)
    notify(progress, f"{center_name}: classified {len(individual)} individual, {len(boxed)} boxed")

    # Step 2: Consolidated invoices for recipients with several individual items
    results = consolidate(individual, shipping_cost)
    invoices = [r.invoice for r in results if r.invoice is not None]
    skipped = [r for r in results if r.invoice is None]
    notify(progress, f"{center_name}: created {len(invoices)} consolidated invoice(s)")
    for r in skipped:
        notify(
            progress,
            f"{center_name}: left {len(r.members)} item(s) for {r.key.recipient_name} "
            f"unconsolidated ({r.skipped_reason})"
        )

    # Step 3: Star marking (exactly once per order)
    individual = annotate_addresses(individual)
    boxed = annotate_addresses(boxed)
    invoices = annotate_addresses(invoices)
    notify(progress, f"{center_name}: star marking done")

    # Step 4: Final manifest
    manifest = merge(individual, boxed, invoices)
    notify(progress, f"{center_name}: manifest merged ({len(manifest)} rows)")

    return manifest


# =============================================================================
# HELPERS
# =============================================================================

def _failure(progress: ProgressSink | None, center_name: str, error: Exception) -> RuntimeError:
    """Report a failed run and build the error raised to the caller."""
    notify(progress, f"{center_name}: processing failed: {error}")
    return RuntimeError(f"{center_name} processing failed: {error}")


def _label(special_type: str | CenterType | None) -> str:
    if isinstance(special_type, CenterType):
        return special_type.value
    return special_type or CenterType.STANDARD.value


__all__ = [
    "process",
    "process_special_shipment",
    "process_centers",
    "build_manifest",
]
