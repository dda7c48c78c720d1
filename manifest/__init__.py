"""
Shipment Manifest Module

Turns one distribution center's order records into its final shipment
manifest (boxed items, consolidated invoices, star-marked addresses, and
special-center pricing).
"""

from .build_manifest import process, process_special_shipment, process_centers
from .version import VERSION

__all__ = ["process", "process_special_shipment", "process_centers", "VERSION"]
