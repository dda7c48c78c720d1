"""
Pipeline Package

Standard per-center processing steps (list of Orders in, list of Orders out):
- classify: Split valid orders into individual and boxed items
- consolidate: Build consolidated invoices per recipient
- annotate: Star mark dwelling-type addresses
- merge: Assemble the final manifest
"""

from .classify import classify
from .consolidate import ConsolidationResult, consolidate, group_by_recipient
from .annotate import annotate_addresses, needs_star
from .merge import merge

__all__ = [
    "classify",
    "consolidate",
    "group_by_recipient",
    "ConsolidationResult",
    "annotate_addresses",
    "needs_star",
    "merge",
]
