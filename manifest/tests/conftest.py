"""
Shared fixtures for manifest tests.
"""

from decimal import Decimal

import polars as pl
import pytest

from manifest.columns import ORDER_SCHEMA
from manifest.order import Order


# Valid individual item, no star keyword, no event, region without surcharge
BASE_ROW = {
    "order_number": "ORD-001",
    "order_date": "2026-10-01",
    "recipient_name": "Kim",
    "recipient_phone": "010-1234-5678",
    "address": "Seoul Gangnam-gu Teheran-ro 1",
    "detail_address": "3F",
    "zip_code": "06000",
    "product_code": "P-001",
    "product_name": "Green Tea",
    "quantity": 1,
    "unit_price": 1000.0,
    "total_price": 1000.0,
    "shipping_type": "parcel",
    "shipping_center": "Seoul",
    "payment_method": "card",
    "shipping_cost": 2500.0,
    "box_size": "",
    "special_note": "",
    "processing_status": "",
    "store_name": "Main Store",
    "event_type": "",
    "price_category": "normal",
    "region": "서울",
    "delivery_area": "Seoul",
}

BASE_ORDER = {
    **BASE_ROW,
    "unit_price": Decimal("1000"),
    "total_price": Decimal("1000"),
    "shipping_cost": Decimal("2500"),
}


@pytest.fixture
def make_order():
    """Factory for Orders: BASE_ORDER with overrides."""
    def _make(**overrides) -> Order:
        return Order(**{**BASE_ORDER, **overrides})
    return _make


@pytest.fixture
def make_frame():
    """Factory for order tables: one BASE_ROW per dict of overrides."""
    def _make(*rows: dict) -> pl.DataFrame:
        return pl.DataFrame(
            [{**BASE_ROW, **row} for row in rows],
            schema=ORDER_SCHEMA,
        )
    return _make


@pytest.fixture
def base_row() -> dict:
    """A single valid row as a dict."""
    return dict(BASE_ROW)
