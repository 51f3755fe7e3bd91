"""
Tests for Catalog & Closure Checker

Verifies:
  - Default suggestion shape and bootstrap-only suggestion
  - contains_choice compares value bits only
  - is_complete closure over every open toggle
  - DimensionMismatch leaves the catalog untouched
  - Two-action scenario (swimming / reading)
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from binstat.kernel import BinaryState, Catalog, DimensionMismatch, catalog_receipts


# ═══════════════════════════════════════════════════════════════════════
# Suggestions
# ═══════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("n", [0, 1, 3, 9])
def test_default_suggestion_all_open(n):
    catalog = Catalog([f"action-{i}" for i in range(n)])
    s = catalog.default_suggestion()

    assert len(s) == n
    assert all(v is False for v in s.value)
    assert all(t is True for t in s.togglable)


def test_suggestion_only_when_empty():
    catalog = Catalog(["x", "y"])
    assert catalog.suggestion() == catalog.default_suggestion()

    catalog.push_pairs([(True, False), (True, False)])
    assert catalog.suggestion() is None

    print("✓ Suggestion present iff catalog empty")


def test_no_suggestion_for_incomplete_catalog():
    """An incomplete populated catalog does not synthesize missing states."""
    catalog = Catalog(["x"])
    catalog.push_pairs([(False, True)])

    assert not catalog.is_complete()
    assert catalog.suggestion() is None


# ═══════════════════════════════════════════════════════════════════════
# Closure
# ═══════════════════════════════════════════════════════════════════════

def test_contains_choice_alone_is_false():
    catalog = Catalog(["x", "y"])
    s = catalog.push_pairs([(True, True), (False, True)])

    assert not catalog.contains_choice(s, 0)
    assert not catalog.contains_choice(s, 1)


def test_contains_choice_ignores_togglable():
    catalog = Catalog(["x", "y"])
    s = catalog.push_pairs([(False, True), (False, True)])
    # Target recorded with no open choices at all
    catalog.push_pairs([(True, False), (False, False)])

    assert catalog.contains_choice(s, 0)
    assert not catalog.contains_choice(s, 1)


def test_contains_choice_unrecorded_state():
    """The queried state need not be in the catalog itself."""
    catalog = Catalog(["x", "y"])
    catalog.push_pairs([(True, False), (True, False)])

    probe = BinaryState.from_pairs([(False, True), (True, True)])
    assert catalog.contains_choice(probe, 0)
    assert not catalog.contains_choice(probe, 1)


def test_empty_catalog_is_complete():
    assert Catalog(["x", "y"]).is_complete()


def test_closed_entries_without_choices_are_complete():
    catalog = Catalog(["x", "y"])
    catalog.push_pairs([(True, False), (False, False)])
    assert catalog.is_complete()


def test_incomplete_until_target_pushed():
    catalog = Catalog(["x", "y", "z"])
    catalog.push_pairs([(False, False), (True, True), (False, False)])

    assert not catalog.is_complete()
    assert catalog.missing_choices() == [(0, 1)]

    catalog.push_pairs([(False, False), (False, False), (False, False)])

    assert catalog.is_complete()
    assert catalog.missing_choices() == []


def test_missing_choices_order():
    catalog = Catalog(["x", "y"])
    catalog.push_pairs([(False, True), (False, True)])
    catalog.push_pairs([(True, True), (True, True)])

    assert catalog.missing_choices() == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_debug_closure_prints_to_stderr(monkeypatch, capsys):
    monkeypatch.setenv("DEBUG_CLOSURE", "1")
    catalog = Catalog(["x"])
    catalog.push_pairs([(False, True)])

    assert not catalog.is_complete()
    assert "Unresolved toggle: entry 0" in capsys.readouterr().err


# ═══════════════════════════════════════════════════════════════════════
# Dimension checks
# ═══════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("pairs", [
    [],
    [(True, True)],
    [(True, True), (False, False), (True, False)],
])
def test_push_pairs_wrong_length_rejected(pairs):
    catalog = Catalog(["x", "y"])
    catalog.push_pairs([(False, True), (False, True)])
    before = list(catalog.entries)

    with pytest.raises(DimensionMismatch) as exc_info:
        catalog.push_pairs(pairs)

    assert exc_info.value.expected == 2
    assert exc_info.value.actual == len(pairs)
    assert catalog.entries == before
    assert len(catalog) == 1


def test_push_state_wrong_length_rejected():
    catalog = Catalog(["x", "y"])
    with pytest.raises(DimensionMismatch):
        catalog.push(BinaryState.from_pairs([(True, True)]))
    assert len(catalog) == 0


def test_dimension_mismatch_is_value_error():
    assert issubclass(DimensionMismatch, ValueError)


def test_dimensions_fixed_at_construction():
    """Neither the caller's list nor the actions attribute can grow the catalog."""
    labels = ["a"]
    catalog = Catalog(labels)
    catalog.push_pairs([(False, True)])

    labels.append("b")
    assert catalog.dimensions == 1
    assert catalog.actions == ("a",)

    with pytest.raises(AttributeError):
        catalog.actions.append("b")
    with pytest.raises(AttributeError):
        catalog.actions = ["a", "b"]

    with pytest.raises(DimensionMismatch):
        catalog.push_pairs([(False, True), (False, True)])

    assert len(catalog) == 1
    assert len(catalog.default_suggestion()) == 1
    # Closure summary stays computable
    assert catalog_receipts("fixed-dims", catalog)["payload"]["dimensions"] == 1


# ═══════════════════════════════════════════════════════════════════════
# Scenario: two independent hobbies
# ═══════════════════════════════════════════════════════════════════════

def test_swimming_and_reading():
    catalog = Catalog(["Go swimming", "Read a book"])

    # 1. Empty catalog suggests the all-open default
    first = catalog.suggestion()
    assert first == BinaryState.from_pairs([(False, True), (False, True)])

    # 2. Record it; nothing reachable yet
    catalog.push(first)
    assert not catalog.is_complete()
    assert not catalog.contains_choice(first, 0)

    # 3. Swimming: can stop swimming, can't read
    swimming = catalog.push_pairs([(True, True), (False, False)])
    assert catalog.contains_choice(first, 0)
    assert catalog.contains_choice(swimming, 0)
    assert not catalog.is_complete()
    assert catalog.missing_choices() == [(0, 1)]

    # 4. Reading: can't start swimming, can stop reading
    catalog.push_pairs([(False, False), (True, True)])
    assert catalog.is_complete()
    assert catalog.suggestion() is None

    print("✓ Swimming/reading catalog closes after three entries")
