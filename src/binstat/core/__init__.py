"""
Core foundation: receipts, hashing, serialization, parameter registry.

Frozen constants and deterministic byte-level encoding.
"""

from .registry import param_registry, RegistryError
from .hashing import blake3_hash, stable_json_hash
from .bytesio import (
    pack_bits_be,
    serialize_state_be,
    serialize_catalog_be,
    SerializationError
)
from .receipts import (
    CatalogSummary,
    seal_receipt,
    check_summary,
    assert_double_run_equal,
    ReceiptError,
    DeterminismError
)

__all__ = [
    # Registry
    "param_registry",
    "RegistryError",

    # Hashing
    "blake3_hash",
    "stable_json_hash",

    # Serialization
    "pack_bits_be",
    "serialize_state_be",
    "serialize_catalog_be",
    "SerializationError",

    # Receipts
    "CatalogSummary",
    "seal_receipt",
    "check_summary",
    "assert_double_run_equal",
    "ReceiptError",
    "DeterminismError",
]
