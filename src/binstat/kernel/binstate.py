"""
Kernel Component: Binary State

A state is a pair of same-length bit sequences:
  - value[i]: current setting of dimension i
  - togglable[i]: True iff dimension i may currently be flipped

Both sequences are stored as tuples of bool; value_mask / choice_mask give
the same bits as Python ints (bit i == dimension i).
"""

from typing import Callable, Iterator, List, Sequence, Tuple


class BinaryState:
    """
    Immutable (value, togglable) pair over a fixed number of dimensions.

    Equality and hashing are structural over both sequences.
    """

    __slots__ = ("_value", "_togglable")

    def __init__(self, value: Sequence[bool], togglable: Sequence[bool]):
        value = tuple(bool(v) for v in value)
        togglable = tuple(bool(t) for t in togglable)
        if len(value) != len(togglable):
            raise ValueError(
                f"value/togglable length mismatch: {len(value)} vs {len(togglable)}"
            )
        self._value = value
        self._togglable = togglable

    @classmethod
    def from_pairs(cls, pairs: Sequence[Tuple[bool, bool]]) -> "BinaryState":
        """
        Build a state from (value, togglable) pairs, one per dimension.

        Any length is accepted; it becomes the dimension count of the state.

        Example:
            >>> s = BinaryState.from_pairs([(True, True), (False, False)])
            >>> s.value, s.togglable
            ((True, False), (True, False))
        """
        pairs = list(pairs)
        return cls([a for a, _ in pairs], [b for _, b in pairs])

    @property
    def value(self) -> Tuple[bool, ...]:
        return self._value

    @property
    def togglable(self) -> Tuple[bool, ...]:
        return self._togglable

    @property
    def value_mask(self) -> int:
        return _to_mask(self._value)

    @property
    def choice_mask(self) -> int:
        return _to_mask(self._togglable)

    def pairs(self) -> List[Tuple[bool, bool]]:
        return list(zip(self._value, self._togglable))

    def choices(self) -> Iterator[int]:
        """Yield every dimension index i with togglable[i] True, ascending."""
        for i, open_ in enumerate(self._togglable):
            if open_:
                yield i

    def for_each_choice(self, visit: Callable[[int], None]) -> None:
        """Invoke visit(i) for each open choice, in ascending order."""
        for i in self.choices():
            visit(i)

    def flipped(self, i: int) -> Tuple[bool, ...]:
        """The value sequence reached by toggling dimension i."""
        if not 0 <= i < len(self._value):
            raise IndexError(f"dimension must be 0..{len(self._value) - 1}, got {i}")
        return self._value[:i] + (not self._value[i],) + self._value[i + 1:]

    def choices_not_in(self, catalog) -> Iterator[int]:
        """
        Yield the open choices whose toggle target is not recorded in catalog.

        Args:
            catalog: Anything exposing contains_choice(state, i).
        """
        for i in self.choices():
            if not catalog.contains_choice(self, i):
                yield i

    def __len__(self) -> int:
        return len(self._value)

    def __iter__(self) -> Iterator[Tuple[bool, bool]]:
        return iter(zip(self._value, self._togglable))

    def __eq__(self, other) -> bool:
        if not isinstance(other, BinaryState):
            return NotImplemented
        return self._value == other._value and self._togglable == other._togglable

    def __hash__(self) -> int:
        return hash((self._value, self._togglable))

    def __setattr__(self, name, val):
        if hasattr(self, name):
            raise AttributeError(f"BinaryState is immutable (tried to set '{name}')")
        object.__setattr__(self, name, val)

    def __delattr__(self, name):
        raise AttributeError(f"BinaryState is immutable (tried to delete '{name}')")

    def __repr__(self) -> str:
        bits = "".join("1" if v else "0" for v in self._value)
        opens = "".join("^" if t else "." for t in self._togglable)
        return f"BinaryState(value={bits!r}, togglable={opens!r})"


def _to_mask(bits: Tuple[bool, ...]) -> int:
    mask = 0
    for i, b in enumerate(bits):
        if b:
            mask |= (1 << i)  # bit i = dimension i
    return mask
