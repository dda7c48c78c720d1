"""
Build Shipment Manifests
========================

Reads an order export CSV, builds the manifest for one center or for every
center in the file, and writes one CSV per center.

Modes:
    --center NAME       Treat the whole file as one center's orders
    --all-centers       Split the file by shipping_center and build each manifest

Usage:
    python -m manifest.scripts.run_manifest orders.csv --center Seoul --shipping-cost 3000
    python -m manifest.scripts.run_manifest orders.csv --center Busan --shipping-cost 3000 --special-type 감천
    python -m manifest.scripts.run_manifest orders.csv --all-centers --cost Seoul=3000 --cost Busan=3500 --special Busan=감천
    python -m manifest.scripts.run_manifest orders.csv --all-centers --cost Seoul=3000 --dry-run
"""

import argparse
import sys
from pathlib import Path

import polars as pl

from manifest.build_manifest import process, process_special_shipment, process_centers
from manifest.data.loaders import load_orders, write_manifest
from manifest.version import VERSION


# =============================================================================
# HELPERS
# =============================================================================

def parse_assignments(values: list[str] | None, option: str) -> dict[str, str]:
    """
    Parse repeated CENTER=VALUE options into a dict.

    Raises:
        ValueError: If a value has no '=' or an empty center name
    """
    result = {}
    for value in values or []:
        center, sep, setting = value.partition("=")
        if not sep or not center.strip():
            raise ValueError(f"{option} expects CENTER=VALUE, got '{value}'")
        result[center.strip()] = setting.strip()
    return result


def output_path(output_dir: Path, center: str) -> Path:
    """CSV path for a center's manifest."""
    safe_name = "".join(c if c.isalnum() or c in "-_" else "_" for c in center) or "unassigned"
    return output_dir / f"manifest_{safe_name}.csv"


def print_summary(input_rows: int, manifests: dict[str, pl.DataFrame]) -> None:
    """Print row counts per center."""
    print("\n" + "=" * 60)
    print("MANIFEST SUMMARY")
    print("=" * 60)
    print(f"Input rows: {input_rows:,}")
    for center, df in manifests.items():
        print(f"  {center:<20} {len(df):>8,} rows")
    print(f"Output rows: {sum(len(df) for df in manifests.values()):,}")


# =============================================================================
# PIPELINE
# =============================================================================

def run_single_center(
    df: pl.DataFrame,
    center: str,
    shipping_cost: str,
    special_type: str | None
) -> dict[str, pl.DataFrame]:
    """Build one manifest from the whole file."""
    if special_type:
        manifest = process_special_shipment(df, center, shipping_cost, special_type, progress=print)
    else:
        manifest = process(df, center, shipping_cost, progress=print)
    return {center: manifest}


def run_all_centers(
    df: pl.DataFrame,
    costs: dict[str, str],
    specials: dict[str, str]
) -> dict[str, pl.DataFrame]:
    """Build one manifest per shipping_center."""
    return process_centers(df, costs, specials, progress=print)


def write_manifests(
    manifests: dict[str, pl.DataFrame],
    output_dir: Path,
    source_headers: bool,
    dry_run: bool
) -> None:
    """Write every manifest to output_dir (or show what would be written)."""
    for center, df in manifests.items():
        path = output_path(output_dir, center)
        if dry_run:
            print(f"  [DRY RUN] Would write {len(df):,} rows to {path}")
            continue
        write_manifest(df, path, source_headers=source_headers)
        print(f"  Wrote {len(df):,} rows to {path}")


# =============================================================================
# MAIN
# =============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Build shipment manifests from an order export",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  --center NAME   Treat the whole file as one center's orders
  --all-centers   Split the file by shipping_center and build each manifest

Special center types:
  감천 / gamcheon   Regional surcharge (Busan +10%, Gyeongnam +5%, shipping x1.2)
  카카오 / kakao    Event discount (new member 10%, repurchase 5%, VIP 20%, shipping x0.8)

Examples:
  python -m manifest.scripts.run_manifest orders.csv --center Seoul --shipping-cost 3000
  python -m manifest.scripts.run_manifest orders.csv --all-centers --cost Seoul=3000 --cost Busan=3500 --special Busan=감천
        """
    )

    parser.add_argument("input", type=Path, help="Order export CSV")

    # Mode selection (mutually exclusive, required)
    mode_group = parser.add_mutually_exclusive_group(required=True)
    mode_group.add_argument(
        "--center",
        type=str,
        metavar="NAME",
        help="Build a single manifest for this center"
    )
    mode_group.add_argument(
        "--all-centers",
        action="store_true",
        help="Build one manifest per shipping_center"
    )

    # Single-center options
    parser.add_argument(
        "--shipping-cost",
        type=str,
        help="Shipping cost for --center"
    )
    parser.add_argument(
        "--special-type",
        type=str,
        help="Center type for --center (감천, 카카오, ...)"
    )

    # All-centers options
    parser.add_argument(
        "--cost",
        action="append",
        metavar="CENTER=AMOUNT",
        help="Shipping cost per center for --all-centers (repeatable)"
    )
    parser.add_argument(
        "--special",
        action="append",
        metavar="CENTER=TYPE",
        help="Center type per center for --all-centers (repeatable)"
    )

    # Common options
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output"),
        help="Directory for manifest CSVs (default: output)"
    )
    parser.add_argument(
        "--source-headers",
        action="store_true",
        help="Input and output use export headers (주문번호, 수취인명, ...)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build manifests but don't write any files"
    )

    args = parser.parse_args()

    if args.center is not None and args.shipping_cost is None:
        parser.error("--center requires --shipping-cost")

    print(f"\n=== Shipment Manifest Builder (version {VERSION}) ===\n")

    try:
        df = load_orders(args.input, source_headers=args.source_headers)
        print(f"Loaded {len(df):,} rows from {args.input}")

        if args.all_centers:
            manifests = run_all_centers(
                df,
                costs=parse_assignments(args.cost, "--cost"),
                specials=parse_assignments(args.special, "--special"),
            )
        else:
            manifests = run_single_center(
                df,
                center=args.center,
                shipping_cost=args.shipping_cost,
                special_type=args.special_type,
            )

        print_summary(len(df), manifests)
        write_manifests(manifests, args.output_dir, args.source_headers, args.dry_run)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
