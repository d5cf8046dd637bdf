from functools import total_ordering
from typing import Iterable, Iterator


@total_ordering
class Binding:
    """
    A map from dense slot indices to integer values, stored as a list.

    Two uses share this type:
      - slot assignment while building a rule or query: `insert(variable_name_id)`
        returns the slot for that variable, creating it on first sight only;
      - value assignment while evaluating: slot i holds the constant id
        chosen for the i-th distinct variable.
    """
    __slots__ = ("_values",)

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._values: list[int] = list(values)

    def __len__(self) -> int:
        return len(self._values)

    def insert(self, value: int) -> int:
        """Return the slot holding `value`, appending a new slot if it is not present."""
        for slot, v in enumerate(self._values):
            if v == value:
                return slot
        self._values.append(value)
        return len(self._values) - 1

    def get(self, slot: int) -> int:
        return self._values[slot]

    def __getitem__(self, slot: int) -> int:
        return self._values[slot]

    def items(self) -> Iterator[tuple[int, int]]:
        """Yield (slot, value) pairs in slot order."""
        return enumerate(self._values)

    def values(self) -> tuple[int, ...]:
        return tuple(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Binding):
            return NotImplemented
        return self._values == other._values

    def __lt__(self, other: 'Binding') -> bool:
        if not isinstance(other, Binding):
            return NotImplemented
        return self._values < other._values

    __hash__ = None

    def __repr__(self) -> str:
        return f"Binding({self._values!r})"
