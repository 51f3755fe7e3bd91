"""
Core Component: Parameter Registry

Frozen constants for deterministic catalog encoding and closure checks.
Every receipt digest is bound to the hash of this mapping, so two digests
can only match when they were produced under identical parameters.

No randomness, no environment leakage, no optionals.
"""


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by binstat.

    Keys and values are JSON-serializable primitives or lists.

    Returns:
        dict: Frozen parameter mapping with exact keys and values.

    Raises:
        RegistryError: If any required key is missing (internal consistency check).
    """
    registry = {
        "format_version": "1.0",

        # Dimension i of a state lives at bit i of its int mask;
        # byte encoding puts the lowest dimension at bit 7 of each byte
        "bit_order": "dim0-msb-first",

        "hash_algo": "BLAKE3",

        # (value, togglable) used for every dimension of the default suggestion:
        # nothing decided yet, everything open
        "default_choice_pair": [False, True],

        # Byte frame tags for serialization (ASCII 4-byte tags)
        "byte_frame_tags": {
            "STATE": "BST1",
            "CATALOG": "CAT1"
        },

        # Dimension counts are encoded as uint16
        "max_dimensions": 65535,
    }

    required_keys = {
        "format_version", "bit_order", "hash_algo", "default_choice_pair",
        "byte_frame_tags", "max_dimensions"
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing or unexpected keys."""
    pass
