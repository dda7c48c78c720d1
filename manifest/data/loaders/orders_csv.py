"""
Order CSV Loader

Reads order exports into tables with the order columns, and writes finished
manifests back out.

Every column is read as text first so ZIP codes, phone numbers and order
numbers keep their leading zeros. Quantity and money columns are then cast;
values that do not parse become null (and an order with no quantity is
dropped by the pipeline as invalid).
"""

from pathlib import Path

import polars as pl

from ...columns import (
    INTEGER_COLS,
    MONEY_COLS,
    rename_source_columns,
    to_source_columns,
    validate_columns,
)


def load_orders(path: str | Path, source_headers: bool = False) -> pl.DataFrame:
    """
    Load an order export from CSV.

    Args:
        path: CSV file path
        source_headers: True if the file uses export headers (주문번호, ...)

    Returns:
        DataFrame with text columns as Utf8, quantity as Int64, money as Float64

    Raises:
        ValueError: If the file is missing order columns
    """
    df = pl.read_csv(path, infer_schema_length=0)

    if source_headers:
        df = rename_source_columns(df)

    validate_columns(df)

    return df.with_columns(
        [pl.col(c).str.strip_chars().cast(pl.Int64, strict=False) for c in INTEGER_COLS] +
        [pl.col(c).str.strip_chars().cast(pl.Float64, strict=False) for c in MONEY_COLS]
    )


def write_manifest(
    df: pl.DataFrame,
    path: str | Path,
    source_headers: bool = False
) -> Path:
    """
    Write a manifest to CSV, creating the parent directory if needed.

    Args:
        df: Manifest table
        path: Output CSV path
        source_headers: True to write export headers instead of order columns

    Returns:
        The path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if source_headers:
        df = to_source_columns(df)

    df.write_csv(path)
    return path
