"""
Kernel Component: Catalog & Closure Checker

A catalog records observed states over a fixed list of action descriptors
(one per dimension) and answers closure queries:

  contains_choice(s, i): is the state reached by toggling dimension i of s
                         already recorded? (compared on value bits only)
  is_complete():         does every open toggle of every recorded entry
                         land on a recorded entry?

Suggestions are bootstrap-only: an empty catalog suggests the all-open
default state, a populated catalog suggests nothing.
"""

import os
import sys
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

from ..core.registry import param_registry
from .binstate import BinaryState

TAction = TypeVar("TAction")


class Catalog(Generic[TAction]):
    """
    Ordered record of BinaryState entries over len(actions) dimensions.

    Entries are only ever appended; insertion order is kept for
    deterministic iteration and receipts.
    """

    def __init__(self, actions: Sequence[TAction] = ()):
        self._actions: Tuple[TAction, ...] = tuple(actions)
        self._dimensions = len(self._actions)
        self.entries: List[BinaryState] = []

    @property
    def actions(self) -> Tuple[TAction, ...]:
        return self._actions

    @property
    def dimensions(self) -> int:
        """Fixed at construction."""
        return self._dimensions

    def push(self, state: BinaryState) -> None:
        """
        Append an already built state.

        Raises:
            DimensionMismatch: If len(state) != len(actions). The catalog is
                left unchanged.
        """
        if len(state) != self._dimensions:
            raise DimensionMismatch(self._dimensions, len(state))
        self.entries.append(state)

    def push_pairs(self, pairs: Sequence[Tuple[bool, bool]]) -> BinaryState:
        """
        Build a state from (value, togglable) pairs and append it.

        Returns:
            BinaryState: The appended state.

        Raises:
            DimensionMismatch: If len(pairs) != len(actions). Nothing is appended.
        """
        state = BinaryState.from_pairs(pairs)
        self.push(state)
        return state

    def contains_choice(self, state: BinaryState, i: int) -> bool:
        """
        True iff some entry's value equals state.value with dimension i negated.

        The togglable bits of the candidate entry are ignored.
        """
        target = state.flipped(i)
        return any(entry.value == target for entry in self.entries)

    def missing_choices(self) -> List[Tuple[int, int]]:
        """
        Every unresolved open toggle as (entry_index, dimension).

        Ordered by entry insertion, then ascending dimension.
        """
        missing = []
        for idx, entry in enumerate(self.entries):
            for i in entry.choices_not_in(self):
                missing.append((idx, i))
        return missing

    def is_complete(self) -> bool:
        """True iff the entries are closed under every toggle they allow."""
        for idx, entry in enumerate(self.entries):
            for i in entry.choices_not_in(self):
                if os.environ.get("DEBUG_CLOSURE"):
                    print(
                        f"  Unresolved toggle: entry {idx} {entry!r}, dim {i}",
                        file=sys.stderr
                    )
                return False
        return True

    def default_suggestion(self) -> BinaryState:
        """All dimensions off, all dimensions open."""
        value, togglable = param_registry()["default_choice_pair"]
        return BinaryState.from_pairs([(value, togglable)] * self._dimensions)

    def suggestion(self) -> Optional[BinaryState]:
        """
        Suggest a state to record next.

        Only an empty catalog gets a suggestion (the default state); a populated
        catalog returns None even when is_complete() is False.
        """
        if not self.entries:
            return self.default_suggestion()
        return None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __repr__(self) -> str:
        return f"Catalog(dimensions={self._dimensions}, entries={len(self.entries)})"


class DimensionMismatch(ValueError):
    """Raised when a state's dimension count differs from the expected action count."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Dimension mismatch: expected {expected} dimensions, got {actual}"
        )
