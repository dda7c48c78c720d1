"""
Manifest Data Loaders

File loaders for order exports and finished manifests.
"""

from .orders_csv import load_orders, write_manifest

__all__ = [
    "load_orders",
    "write_manifest",
]
