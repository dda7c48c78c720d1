"""
Column Schema Definitions

Documents the order columns every input table must carry, the Korean export
headers they come from, and provides validation utilities.
"""

import polars as pl


# =============================================================================
# ORDER COLUMNS (must be present in every input table)
# =============================================================================

TEXT_COLS = [
    # Order
    "order_number",         # Order identifier
    "recipient_name",       # Recipient (half of the consolidation key)
    "recipient_phone",      # Recipient phone number
    "address",              # Delivery address (other half of the key, star marked)
    "detail_address",       # Building / unit details
    "zip_code",             # Postal code (kept as text, leading zeros)
    # Product
    "product_code",         # Product code
    "product_name",         # Product name (joined into consolidated notes)
    # Shipping
    "shipping_type",        # Delivery method
    "shipping_center",      # Distribution center the row ships from
    "payment_method",       # Payment method
    # Special processing
    "box_size",             # Empty = individual item, set = boxed item
    "special_note",         # Free-form note
    "processing_status",    # Processing status
    # Additional
    "store_name",           # Store / sales channel
    "event_type",           # Event tier for the event-discount center
    "price_category",       # Price grade
    "region",               # Region for the regional-surcharge center
    "delivery_area",        # Delivery area
]

INTEGER_COLS = [
    "quantity",             # Items ordered (> 0 for a valid row)
]

MONEY_COLS = [
    "unit_price",           # Price per item
    "total_price",          # Expected unit_price * quantity (not recomputed)
    "shipping_cost",        # Shipping cost for the row
]

DATE_COLS = [
    "order_date",           # Passed through untouched
]

ORDER_COLUMNS = [
    "order_number",
    "order_date",
    "recipient_name",
    "recipient_phone",
    "address",
    "detail_address",
    "zip_code",
    "product_code",
    "product_name",
    "quantity",
    "unit_price",
    "total_price",
    "shipping_type",
    "shipping_center",
    "payment_method",
    "shipping_cost",
    "box_size",
    "special_note",
    "processing_status",
    "store_name",
    "event_type",
    "price_category",
    "region",
    "delivery_area",
]


# =============================================================================
# DEFAULT SCHEMA (used when building a table from scratch)
# =============================================================================

ORDER_SCHEMA = {
    col: (
        pl.Int64 if col in INTEGER_COLS
        else pl.Float64 if col in MONEY_COLS
        else pl.Utf8
    )
    for col in ORDER_COLUMNS
}


# =============================================================================
# SOURCE HEADERS (order export column names)
# =============================================================================

SOURCE_HEADERS = {
    "주문번호": "order_number",
    "주문일자": "order_date",
    "수취인명": "recipient_name",
    "수취인연락처": "recipient_phone",
    "주소": "address",
    "상세주소": "detail_address",
    "우편번호": "zip_code",
    "품목코드": "product_code",
    "품목명": "product_name",
    "수량": "quantity",
    "단가": "unit_price",
    "총액": "total_price",
    "배송타입": "shipping_type",
    "출고지": "shipping_center",
    "결제방법": "payment_method",
    "배송비": "shipping_cost",
    "박스크기": "box_size",
    "특이사항": "special_note",
    "처리상태": "processing_status",
    "매장명": "store_name",
    "이벤트타입": "event_type",
    "가격카테고리": "price_category",
    "지역": "region",
    "배송지역": "delivery_area",
}


# =============================================================================
# VALIDATION / RENAMING
# =============================================================================

def missing_columns(df: pl.DataFrame) -> list[str]:
    """Order columns absent from a table, in schema order."""
    present = set(df.columns)
    return [col for col in ORDER_COLUMNS if col not in present]


def validate_columns(df: pl.DataFrame) -> None:
    """
    Check that a table carries every order column.

    Raises:
        ValueError: If any order column is missing
    """
    missing = missing_columns(df)
    if missing:
        raise ValueError(
            f"Input is missing {len(missing)} order column(s): {', '.join(missing)}"
        )


def rename_source_columns(df: pl.DataFrame) -> pl.DataFrame:
    """Rename export headers (주문번호, ...) to order columns. Other columns are kept."""
    mapping = {src: dst for src, dst in SOURCE_HEADERS.items() if src in df.columns}
    return df.rename(mapping)


def to_source_columns(df: pl.DataFrame) -> pl.DataFrame:
    """Rename order columns back to export headers."""
    reverse = {dst: src for src, dst in SOURCE_HEADERS.items()}
    mapping = {col: reverse[col] for col in df.columns if col in reverse}
    return df.rename(mapping)


__all__ = [
    "TEXT_COLS",
    "INTEGER_COLS",
    "MONEY_COLS",
    "DATE_COLS",
    "ORDER_COLUMNS",
    "ORDER_SCHEMA",
    "SOURCE_HEADERS",
    "missing_columns",
    "validate_columns",
    "rename_source_columns",
    "to_source_columns",
]
