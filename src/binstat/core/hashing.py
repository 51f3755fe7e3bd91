"""
Core Component: BLAKE3 Hashing

Every hash binstat reports (catalog encodings, registry binding, receipt
seals) is a lowercase BLAKE3-256 hex digest.
"""

import json
from typing import Any

import blake3


def blake3_hash(data: bytes) -> str:
    """
    Hex BLAKE3 digest of raw bytes.

    Example:
        >>> len(blake3_hash(b"BST1"))
        64
    """
    return blake3.blake3(data).hexdigest()


def stable_json_hash(obj: Any) -> str:
    """BLAKE3 of obj as compact, key-sorted UTF-8 JSON."""
    text = json.dumps(obj, sort_keys=True, ensure_ascii=False, separators=(',', ':'))
    return blake3_hash(text.encode('utf-8'))
