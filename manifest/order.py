"""
Order Record

One line item destined for shipment, plus conversion to and from table rows.

Orders are immutable. Pipeline stages that change an order (star marking,
re-pricing) return a copy made with dataclasses.replace, so a record held by
one stage is never modified under another.

ROW CONVERSION
--------------
    Order.from_row()    - one named row (dict) -> Order, lenient parsing:
                          None text -> "", unparseable numbers -> 0
    Order.to_row()      - Order -> tuple in a table schema's column order,
                          each value coerced to the column's dtype
    orders_from_frame() - DataFrame -> list[Order] (validates columns)
    orders_to_frame()   - list[Order] -> DataFrame with a given schema
"""

from dataclasses import dataclass, fields
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, NamedTuple

import polars as pl

from shared.pricing import to_decimal
from .columns import (
    ORDER_COLUMNS,
    ORDER_SCHEMA,
    TEXT_COLS,
    INTEGER_COLS,
    MONEY_COLS,
    validate_columns,
)


# =============================================================================
# RECIPIENT KEY
# =============================================================================

class RecipientKey(NamedTuple):
    """Recipient identity for consolidation. Exact match, no trimming."""
    recipient_name: str
    address: str


# =============================================================================
# ORDER
# =============================================================================

@dataclass(frozen=True)
class Order:
    """A single shipment line item (see columns.py for field meanings)."""

    # Order
    order_number: str = ""
    order_date: date | str | None = None
    recipient_name: str = ""
    recipient_phone: str = ""
    address: str = ""
    detail_address: str = ""
    zip_code: str = ""

    # Product
    product_code: str = ""
    product_name: str = ""
    quantity: int = 0
    unit_price: Decimal = Decimal("0")
    total_price: Decimal = Decimal("0")

    # Shipping
    shipping_type: str = ""
    shipping_center: str = ""
    payment_method: str = ""
    shipping_cost: Decimal = Decimal("0")

    # Special processing
    box_size: str = ""
    special_note: str = ""
    processing_status: str = ""

    # Additional
    store_name: str = ""
    event_type: str = ""
    price_category: str = ""
    region: str = ""
    delivery_area: str = ""

    # -------------------------------------------------------------------------
    # PREDICATES
    # -------------------------------------------------------------------------

    def is_valid(self) -> bool:
        """Usable row: recipient, address and product set, quantity > 0."""
        return (
            bool(self.recipient_name)
            and bool(self.address)
            and bool(self.product_name)
            and self.quantity > 0
        )

    def is_boxed(self) -> bool:
        """Boxed item: box size set (whitespace-only counts as empty)."""
        return bool(self.box_size and self.box_size.strip())

    def recipient_key(self) -> RecipientKey:
        return RecipientKey(self.recipient_name, self.address)

    # -------------------------------------------------------------------------
    # ROW CONVERSION
    # -------------------------------------------------------------------------

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Order":
        """
        Build an Order from a named row.

        Raises:
            KeyError: If the row lacks an order column
        """
        values = {}
        for col in ORDER_COLUMNS:
            value = row[col]
            if col in TEXT_COLS:
                values[col] = _parse_text(value)
            elif col in INTEGER_COLS:
                values[col] = _parse_quantity(value)
            elif col in MONEY_COLS:
                values[col] = _parse_amount(value)
            else:
                values[col] = value
        return cls(**values)

    def to_row(self, schema: Mapping[str, pl.DataType]) -> tuple:
        """
        Serialize into a row for a table with the given schema.

        Columns that are not order fields are written as null.
        """
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        return tuple(
            _coerce(values.get(col), dtype)
            for col, dtype in schema.items()
        )


# =============================================================================
# FRAME CONVERSION
# =============================================================================

def orders_from_frame(df: pl.DataFrame) -> list[Order]:
    """
    Convert every row of a table to an Order, in row order.

    Raises:
        ValueError: If the table is missing order columns
    """
    validate_columns(df)
    return [Order.from_row(row) for row in df.iter_rows(named=True)]


def orders_to_frame(
    orders: list[Order],
    schema: Mapping[str, pl.DataType] | None = None
) -> pl.DataFrame:
    """
    Build a table from orders.

    Args:
        orders: Orders to serialize, one row each
        schema: Output schema (ORDER_SCHEMA if not provided); typically the
            input table's schema so the output matches it column for column

    Returns:
        DataFrame with the given schema, except that all-null (pl.Null)
        columns take their ORDER_SCHEMA dtype (Utf8 for other columns)
    """
    if schema is None:
        schema = ORDER_SCHEMA
    schema = output_schema(schema)

    rows = [order.to_row(schema) for order in orders]
    if not rows:
        return pl.DataFrame(schema=schema)
    return pl.DataFrame(rows, schema=schema, orient="row")


def output_schema(schema: Mapping[str, pl.DataType]) -> dict[str, pl.DataType]:
    """
    Schema for writing orders back out.

    A column that was entirely null in the input has dtype pl.Null, which
    cannot hold the values the pipeline writes (empty text, consolidated
    notes). Such columns are widened to their order dtype.
    """
    return {
        col: ORDER_SCHEMA.get(col, pl.Utf8) if dtype == pl.Null else dtype
        for col, dtype in schema.items()
    }


# =============================================================================
# HELPERS
# =============================================================================

def _parse_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _parse_quantity(value) -> int:
    """Integer quantity, 0 if the value is missing or not a whole number."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        try:
            whole = int(value)
        except (ValueError, OverflowError):
            return 0
        return whole if whole == value else 0
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


def _parse_amount(value) -> Decimal:
    """Decimal amount, 0 if the value is missing or not a number."""
    if value is None or isinstance(value, bool):
        return Decimal("0")
    try:
        return to_decimal(value)
    except ValueError:
        return Decimal("0")


def _coerce(value, dtype: pl.DataType):
    """Coerce an order value to a column dtype for table construction."""
    if value is None:
        return None
    if dtype == pl.Utf8:
        return _parse_text(value)
    if isinstance(dtype, pl.Decimal):
        scale = dtype.scale or 0
        return to_decimal(value).quantize(Decimal(1).scaleb(-scale))
    if dtype.is_float():
        return float(value)
    if dtype.is_integer():
        return int(to_decimal(value).quantize(Decimal(1)))
    if dtype == pl.Date and not isinstance(value, date):
        return date.fromisoformat(str(value))
    return value


__all__ = [
    "Order",
    "RecipientKey",
    "orders_from_frame",
    "orders_to_frame",
    "output_schema",
]
