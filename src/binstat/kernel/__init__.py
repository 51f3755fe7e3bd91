"""
Kernel: binary states, catalogs and the closure checker.

Components:
  - binstate: BinaryState (value bits + togglable bits)
  - catalog: Catalog (recorded entries, contains_choice, is_complete, suggestion)
"""

from .binstate import BinaryState
from .catalog import Catalog, DimensionMismatch

__all__ = [
    "BinaryState",
    "Catalog",
    "DimensionMismatch",

    # Receipts
    "catalog_receipts",
]


def catalog_receipts(section_label: str, catalog: Catalog) -> dict:
    """
    Generate receipts describing a catalog and its closure status.

    Args:
        section_label: ASCII identifier (e.g., "closure-check").
        catalog: The catalog to describe. Action descriptors are not recorded.

    Returns:
        dict: Receipt digest with payload keys
            dimensions, entry_count, is_complete, missing_choices,
            has_suggestion, catalog_hash.
    """
    from ..core import blake3_hash, seal_receipt, serialize_catalog_be

    missing = catalog.missing_choices()

    summary = {
        "dimensions": catalog.dimensions,
        "entry_count": len(catalog.entries),
        "is_complete": not missing,
        "missing_choices": [[idx, i] for idx, i in missing],
        "has_suggestion": catalog.suggestion() is not None,
        "catalog_hash": blake3_hash(serialize_catalog_be(catalog)),
    }

    return seal_receipt(section_label, summary)
