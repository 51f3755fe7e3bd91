"""
Core Component: Closure Receipts

A closure receipt freezes what the closure checker saw in one catalog:

  dimensions       number of actions
  entry_count      number of recorded states
  is_complete      closure verdict
  missing_choices  [entry_index, dimension] for every unresolved toggle
  has_suggestion   whether suggestion() would return a state
  catalog_hash     BLAKE3 of the catalog's byte encoding

seal_receipt() checks that the summary is internally consistent before
binding it to the parameter registry and hashing it.
"""

from typing import Callable, List, TypedDict

from .registry import param_registry
from .hashing import stable_json_hash


class CatalogSummary(TypedDict):
    dimensions: int
    entry_count: int
    is_complete: bool
    missing_choices: List[List[int]]
    has_suggestion: bool
    catalog_hash: str


SUMMARY_KEYS = tuple(CatalogSummary.__annotations__)


def seal_receipt(section: str, summary: CatalogSummary) -> dict:
    """
    Validate a catalog summary and wrap it in a hashed receipt.

    Returns:
        dict: {section, format_version, param_registry_hash, payload, section_hash}

    Raises:
        ReceiptError: If the summary is malformed or contradicts itself.
    """
    check_summary(summary)

    registry = param_registry()
    sealed = {
        "section": section,
        "format_version": registry["format_version"],
        "param_registry_hash": stable_json_hash(registry),
        "payload": {key: summary[key] for key in SUMMARY_KEYS},
    }
    sealed["section_hash"] = stable_json_hash(sealed)
    return sealed


def check_summary(summary: CatalogSummary) -> None:
    """
    Raises:
        ReceiptError: On wrong keys, wrong types, out-of-range or unordered
            missing choices, or a verdict that disagrees with missing_choices.
    """
    if set(summary) != set(SUMMARY_KEYS):
        raise ReceiptError(
            f"Summary keys {sorted(summary)} do not match {sorted(SUMMARY_KEYS)}"
        )

    for key in ("dimensions", "entry_count"):
        n = summary[key]
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ReceiptError(f"'{key}' must be a non-negative int, got {n!r}")
    for key in ("is_complete", "has_suggestion"):
        if not isinstance(summary[key], bool):
            raise ReceiptError(f"'{key}' must be a bool, got {summary[key]!r}")

    dimensions = summary["dimensions"]
    entry_count = summary["entry_count"]
    previous = None
    for pair in summary["missing_choices"]:
        if not isinstance(pair, list) or len(pair) != 2:
            raise ReceiptError(f"Missing choice must be [entry, dimension], got {pair!r}")
        if any(isinstance(x, bool) or not isinstance(x, int) for x in pair):
            raise ReceiptError(f"Missing choice must hold ints, got {pair!r}")
        entry, dim = pair
        if not (0 <= entry < entry_count and 0 <= dim < dimensions):
            raise ReceiptError(
                f"Missing choice {pair} outside {entry_count} entries x {dimensions} dimensions"
            )
        if previous is not None and pair <= previous:
            raise ReceiptError(f"Missing choices out of order at {pair}")
        previous = pair

    if summary["is_complete"] != (not summary["missing_choices"]):
        raise ReceiptError("is_complete disagrees with missing_choices")
    if summary["has_suggestion"] != (entry_count == 0):
        raise ReceiptError("has_suggestion must hold exactly for an empty catalog")

    h = summary["catalog_hash"]
    if not isinstance(h, str) or len(h) != 64:
        raise ReceiptError(f"catalog_hash must be a 64-char hex digest, got {h!r}")


def assert_double_run_equal(build_receipt: Callable[[], dict]) -> None:
    """
    Build a sealed receipt twice; the section hashes must agree.

    Raises:
        DeterminismError: Naming the first payload key whose value changed.
    """
    a = build_receipt()
    b = build_receipt()
    if a["section_hash"] == b["section_hash"]:
        return

    changed = next(
        (key for key in SUMMARY_KEYS if a["payload"].get(key) != b["payload"].get(key)),
        None
    )
    raise DeterminismError(a["section"], changed, a["section_hash"], b["section_hash"])


class ReceiptError(Exception):
    """Raised when a catalog summary is malformed or inconsistent."""
    pass


class DeterminismError(Exception):
    """Raised when two builds of the same receipt hash differently."""

    def __init__(self, section: str, changed_key: str | None, hash_a: str, hash_b: str):
        self.section = section
        self.changed_key = changed_key
        self.hash_a = hash_a
        self.hash_b = hash_b
        super().__init__(
            f"Receipt '{section}' is not reproducible "
            f"(first changed key: {changed_key!r}; {hash_a[:16]} != {hash_b[:16]})"
        )
