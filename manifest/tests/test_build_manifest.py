"""
Unit Tests for the Manifest Builder

Tests process(), process_special_shipment() and process_centers() end to end
on small DataFrames.

Run with: pytest manifest/tests/test_build_manifest.py -v
"""

from decimal import Decimal

import polars as pl
import pytest
from polars.testing import assert_frame_equal

import manifest.build_manifest as build_manifest_module
from manifest.build_manifest import (
    build_manifest,
    process,
    process_centers,
    process_special_shipment,
)
from manifest.pricing import CenterType


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def seoul_orders(make_frame):
    """
    One boxed item, two items for recipient A, one invalid row and one
    single item for recipient B.
    """
    return make_frame(
        {"order_number": "B1", "recipient_name": "C", "address": "부산 해운대 빌라", "box_size": "L"},
        {"order_number": "A1", "recipient_name": "A", "address": "Seoul-1 아파트",
         "product_name": "Tea", "quantity": 1, "unit_price": 1000.0, "total_price": 1000.0},
        {"order_number": "X1", "recipient_name": ""},
        {"order_number": "A2", "recipient_name": "A", "address": "Seoul-1 아파트",
         "product_name": "Cup", "quantity": 2, "unit_price": 1000.0, "total_price": 2000.0},
        {"order_number": "S1", "recipient_name": "B", "address": "Seoul-2"},
    )


@pytest.fixture
def messages():
    """Progress sink that records every message."""
    class Recorder(list):
        def __call__(self, message):
            self.append(message)
    return Recorder()


# =============================================================================
# STANDARD PROCESSING TESTS
# =============================================================================

class TestProcess:
    """Tests for process()."""

    def test_manifest_rows(self, seoul_orders):
        """Boxed first, then invoices, then single items; invalid dropped."""
        result = process(seoul_orders, "Seoul", 3000)
        assert result["order_number"].to_list() == ["B1", "A1_consolidated", "S1"]

    def test_schema_matches_input(self, seoul_orders):
        """Output has exactly the input columns and dtypes."""
        result = process(seoul_orders, "Seoul", 3000)
        assert result.schema == seoul_orders.schema

    def test_decimal_schema_matches_input(self, seoul_orders):
        """Decimal money columns stay Decimal in the output."""
        df = seoul_orders.with_columns(
            pl.col("unit_price", "total_price", "shipping_cost").cast(pl.Decimal(18, 2))
        )
        result = process(df, "Seoul", 3000)
        assert result.schema == df.schema

    def test_invoice_values(self, seoul_orders):
        """The invoice sums its members and carries the center shipping cost."""
        invoice = process(seoul_orders, "Seoul", "3000").row(1, named=True)
        assert invoice["quantity"] == 3
        assert invoice["total_price"] == pytest.approx(3000.0)
        assert invoice["unit_price"] == pytest.approx(1000.0)
        assert invoice["shipping_cost"] == pytest.approx(3000.0)
        assert invoice["product_name"] == "Consolidated (2 items)"
        assert invoice["special_note"] == "Tea, Cup"

    def test_star_marked_once(self, seoul_orders):
        """Boxed and consolidated addresses get exactly one marker."""
        result = process(seoul_orders, "Seoul", 3000)
        assert result["address"].to_list() == ["부산 해운대 빌라*", "Seoul-1 아파트*", "Seoul-2"]

    def test_progress_messages(self, seoul_orders, messages):
        """Start and one message per step."""
        process(seoul_orders, "Seoul", 3000, progress=messages)
        assert messages == [
            "Seoul: processing started...",
            "Seoul: classified 3 individual, 1 boxed",
            "Seoul: created 1 consolidated invoice(s)",
            "Seoul: star marking done",
            "Seoul: manifest merged (3 rows)",
        ]

    def test_failing_sink_ignored(self, seoul_orders):
        """A sink that raises does not stop processing."""
        def broken(message):
            raise OSError("closed")

        result = process(seoul_orders, "Seoul", 3000, progress=broken)
        assert len(result) == 3

    def test_missing_column(self, seoul_orders, messages):
        """Missing columns fail the run with the center name."""
        with pytest.raises(RuntimeError, match="Seoul processing failed") as exc_info:
            process(seoul_orders.drop("region"), "Seoul", 3000, progress=messages)
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert messages[-1].startswith("Seoul: processing failed: ")
        assert "region" in messages[-1]

    def test_bad_shipping_cost(self, seoul_orders):
        """A shipping cost that is not a number fails the run."""
        with pytest.raises(RuntimeError, match="Seoul processing failed"):
            process(seoul_orders, "Seoul", "free")

    def test_empty_input(self, make_frame):
        """No rows in, no rows out, same schema."""
        df = make_frame()
        result = process(df, "Seoul", 3000)
        assert len(result) == 0
        assert result.schema == df.schema

    def test_all_invalid(self, make_frame):
        """A table with only invalid rows gives an empty manifest."""
        df = make_frame({"quantity": 0}, {"address": ""})
        assert len(process(df, "Seoul", 3000)) == 0

    def test_all_null_text_column(self, make_frame):
        """An input column that is entirely null is written back as text."""
        df = make_frame(
            {"order_number": "1", "recipient_name": "A"},
            {"order_number": "2", "recipient_name": "A"},
        ).with_columns(pl.lit(None).alias("special_note"))
        assert df.schema["special_note"] == pl.Null

        result = process(df, "Seoul", 3000)
        assert result.schema["special_note"] == pl.Utf8
        assert result["special_note"].to_list() == ["Green Tea, Green Tea"]

    def test_integer_money_columns_rounded(self, make_frame):
        """Integer money columns get the rounded average unit price."""
        df = make_frame(
            {"recipient_name": "A", "unit_price": 100.0, "total_price": 100.0},
            {"recipient_name": "A", "quantity": 2, "unit_price": 50.0, "total_price": 100.0},
        ).with_columns(pl.col("unit_price", "total_price").cast(pl.Int64))
        invoice = process(df, "Seoul", 3000).row(0, named=True)
        assert invoice["total_price"] == 200
        assert invoice["unit_price"] == 67

    def test_skipped_group_reported(self, make_order, messages, monkeypatch):
        """A group that cannot be consolidated is reported and kept individual."""
        monkeypatch.setattr(build_manifest_module, "classify", lambda orders: (list(orders), []))
        orders = [
            make_order(order_number="1", recipient_name="A", quantity=0),
            make_order(order_number="2", recipient_name="A", quantity=0),
        ]
        result = build_manifest(orders, "Seoul", Decimal("3000"), progress=messages)
        assert [o.order_number for o in result] == ["1", "2"]
        assert "Seoul: created 0 consolidated invoice(s)" in messages
        assert "Seoul: left 2 item(s) for A unconsolidated (total quantity is 0)" in messages

    def test_input_unchanged(self, seoul_orders):
        """The input table is not modified."""
        before = seoul_orders.clone()
        process(seoul_orders, "Seoul", 3000)
        assert_frame_equal(seoul_orders, before)


# =============================================================================
# SPECIAL PROCESSING TESTS
# =============================================================================

class TestProcessSpecialShipment:
    """Tests for process_special_shipment()."""

    def test_regional_surcharge(self, make_frame, messages):
        """감천: every valid row re-priced, no consolidation or star marking."""
        df = make_frame(
            {"order_number": "1", "region": "부산", "quantity": 2,
             "unit_price": 1000.0, "total_price": 2000.0, "address": "한빛아파트"},
            {"order_number": "2", "region": "경남", "address": "한빛아파트"},
            {"order_number": "3", "quantity": 0},
        )
        result = process_special_shipment(df, "Busan", 3000, "감천", progress=messages)

        assert result["order_number"].to_list() == ["1", "2"]
        assert result["unit_price"].to_list() == pytest.approx([1100.0, 1050.0])
        assert result["total_price"].to_list() == pytest.approx([2200.0, 1050.0])
        assert result["shipping_cost"].to_list() == pytest.approx([3600.0, 3600.0])
        assert result["address"].to_list() == ["한빛아파트", "한빛아파트"]
        assert result.schema == df.schema
        assert messages == [
            "Busan: 감천 special processing started...",
            "Busan: REGIONAL pricing applied (2 rows)",
        ]

    def test_event_discount(self, make_frame):
        """카카오: event rows discounted, others keep prices, shipping x0.8."""
        df = make_frame(
            {"order_number": "1", "event_type": "VIP"},
            {"order_number": "2", "event_type": "", "total_price": 999.0},
        )
        result = process_special_shipment(df, "Pangyo", 3000, "카카오")
        assert result["unit_price"].to_list() == pytest.approx([800.0, 1000.0])
        assert result["total_price"].to_list() == pytest.approx([800.0, 999.0])
        assert result["shipping_cost"].to_list() == pytest.approx([2400.0, 2400.0])

    def test_center_type_enum(self, make_frame):
        """A CenterType can be passed instead of a name."""
        df = make_frame({"event_type": "신규가입"})
        result = process_special_shipment(df, "Pangyo", 3000, CenterType.EVENT_DISCOUNT)
        assert result["unit_price"][0] == pytest.approx(900.0)

    @pytest.mark.parametrize("special_type", ["서울", "", None, CenterType.STANDARD])
    def test_standard_falls_back(self, seoul_orders, special_type):
        """Anything that is not a special center runs the standard pipeline."""
        assert_frame_equal(
            process_special_shipment(seoul_orders, "Seoul", 3000, special_type),
            process(seoul_orders, "Seoul", 3000),
        )

    def test_fallback_messages(self, seoul_orders, messages):
        """Fallback reports the special start, then the standard steps."""
        process_special_shipment(seoul_orders, "Seoul", 3000, "서울", progress=messages)
        assert messages[0] == "Seoul: 서울 special processing started..."
        assert messages[1] == "Seoul: processing started..."

    def test_failure(self, make_frame, messages):
        """Failures in a special run are reported and raised."""
        df = make_frame({}).drop("event_type")
        with pytest.raises(RuntimeError, match="Pangyo processing failed"):
            process_special_shipment(df, "Pangyo", 3000, "카카오", progress=messages)
        assert messages[-1].startswith("Pangyo: processing failed: ")


# =============================================================================
# MULTI-CENTER TESTS
# =============================================================================

class TestProcessCenters:
    """Tests for process_centers()."""

    @pytest.fixture
    def two_centers(self, make_frame):
        return make_frame(
            {"order_number": "s1", "shipping_center": "Seoul", "recipient_name": "A"},
            {"order_number": "b1", "shipping_center": "Busan", "region": "부산"},
            {"order_number": "s2", "shipping_center": "Seoul", "recipient_name": "A"},
        )

    def test_one_manifest_per_center(self, two_centers):
        """Centers come back in order of first appearance."""
        result = process_centers(two_centers, {"Seoul": 3000, "Busan": 3500})
        assert list(result) == ["Seoul", "Busan"]
        assert result["Seoul"]["order_number"].to_list() == ["s1_consolidated"]
        assert result["Busan"]["order_number"].to_list() == ["b1"]

    def test_special_center(self, two_centers):
        """A center listed in special_types gets special pricing."""
        result = process_centers(
            two_centers, {"Seoul": 3000, "Busan": 3500}, {"Busan": "감천"}
        )
        busan = result["Busan"].row(0, named=True)
        assert busan["unit_price"] == pytest.approx(1100.0)
        assert busan["shipping_cost"] == pytest.approx(4200.0)

    def test_missing_cost(self, two_centers):
        """Every center needs a shipping cost."""
        with pytest.raises(ValueError, match="Busan"):
            process_centers(two_centers, {"Seoul": 3000})

    def test_missing_column(self, two_centers):
        """Missing order columns are rejected before splitting."""
        with pytest.raises(ValueError, match="shipping_center"):
            process_centers(two_centers.drop("shipping_center"), {"Seoul": 3000})

    def test_null_and_empty_center_together(self, make_frame):
        """Null and empty shipping_center rows form one center, none are lost."""
        df = make_frame(
            {"order_number": "1", "shipping_center": "", "recipient_name": "A"},
            {"order_number": "2", "shipping_center": None, "recipient_name": "B"},
        )
        result = process_centers(df, {"": 3000})
        assert list(result) == [""]
        assert result[""]["order_number"].to_list() == ["1", "2"]

    def test_empty(self, make_frame):
        """No rows, no manifests."""
        assert process_centers(make_frame(), {}) == {}
