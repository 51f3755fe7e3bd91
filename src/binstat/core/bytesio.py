"""
Core Component: Byte Serialization (Big-Endian, Dimension-Major)

Stable, deterministic byte encoding of states and catalogs for hashing.
Nothing here is written to disk; the bytes only feed blake3_hash.

Bit mapping (frozen):
  - Within each byte: bit 7 → dim 0, bit 6 → dim 1, ..., bit 0 → dim 7
  - Next byte continues with dim 8 at bit 7, etc.
  - Big-endian for multi-byte integers (dimension count, entry count)

Action descriptors are opaque payloads and are never encoded.
"""

import math

from .registry import param_registry


def pack_bits_be(bits, n: int) -> bytes:
    """
    Pack n booleans into ceil(n/8) bytes, dim 0 at bit 7 of byte 0.

    Args:
        bits: Sequence of at least n booleans.
        n: Dimension count.

    Returns:
        bytes: Packed bits, zero-padded in the last byte.
    """
    out = bytearray(math.ceil(n / 8))
    for i in range(n):
        if bits[i]:
            out[i // 8] |= (1 << (7 - (i % 8)))  # bit 7 → dim 0
    return bytes(out)


def serialize_state_be(state) -> bytes:
    """
    Encode one state as a deterministic byte stream.

    Format (exact):
      - 4 ASCII bytes tag: b"BST1"
      - 2 bytes N (uint16, big-endian): dimension count
      - ceil(N/8) bytes: value bits
      - ceil(N/8) bytes: togglable bits

    Args:
        state: Object with equal-length `value` and `togglable` sequences.

    Returns:
        bytes: Deterministic serialization.

    Raises:
        SerializationError: If the sequences differ in length or N is too large.
    """
    n = _checked_dimensions(state)

    stream = bytearray()
    stream.extend(_tag("STATE"))
    stream.extend(n.to_bytes(2, byteorder='big'))
    stream.extend(pack_bits_be(state.value, n))
    stream.extend(pack_bits_be(state.togglable, n))

    return bytes(stream)


def serialize_catalog_be(catalog) -> bytes:
    """
    Encode a catalog's recorded entries as a deterministic byte stream.

    Format (exact):
      - 4 ASCII bytes tag: b"CAT1"
      - 2 bytes N (uint16, big-endian): dimension count (catalog.dimensions)
      - 4 bytes E (uint32, big-endian): entry count
      - Payload: for each entry in insertion order,
          ceil(N/8) value bytes then ceil(N/8) togglable bytes

    Raises:
        SerializationError: If an entry does not have N dimensions,
            N exceeds max_dimensions, or E does not fit in uint32.
    """
    n = catalog.dimensions
    if n > param_registry()["max_dimensions"]:
        raise SerializationError(f"Too many dimensions: {n}")

    entries = catalog.entries
    if len(entries) > 0xFFFFFFFF:
        raise SerializationError(f"Too many entries: {len(entries)}")

    stream = bytearray()
    stream.extend(_tag("CATALOG"))
    stream.extend(n.to_bytes(2, byteorder='big'))
    stream.extend(len(entries).to_bytes(4, byteorder='big'))

    for idx, entry in enumerate(entries):
        if _checked_dimensions(entry) != n:
            raise SerializationError(
                f"Entry {idx} has {len(entry.value)} dimensions, expected {n}"
            )
        stream.extend(pack_bits_be(entry.value, n))
        stream.extend(pack_bits_be(entry.togglable, n))

    return bytes(stream)


def _checked_dimensions(state) -> int:
    n = len(state.value)
    if len(state.togglable) != n:
        raise SerializationError(
            f"value/togglable length mismatch: {n} vs {len(state.togglable)}"
        )
    if n > param_registry()["max_dimensions"]:
        raise SerializationError(f"Too many dimensions: {n}")
    return n


def _tag(kind: str) -> bytes:
    return param_registry()["byte_frame_tags"][kind].encode('ascii')


class SerializationError(Exception):
    """Raised when serialization encounters inconsistent or oversized dimensions."""
    pass
