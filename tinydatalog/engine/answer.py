from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .binding import Binding

if TYPE_CHECKING:
    from .data_set import DataSet


@dataclass(frozen=True, slots=True)
class Answer:
    """
    One satisfying assignment of a query, as (variable name, constant name) pairs.
    Renders as `{X = vader, Y = luke}`.
    """
    pairs: frozenset[tuple[str, str]]

    @classmethod
    def from_binding(cls, binding: Binding, variables: Binding, data: DataSet) -> Answer:
        return cls(frozenset(
            (data.variable_names[variables[slot]], data.constant_names[const_id])
            for slot, const_id in binding.items()
        ))

    def as_dict(self) -> dict[str, str]:
        return dict(sorted(self.pairs))

    def __getitem__(self, variable: str) -> str:
        for v, c in self.pairs:
            if v == variable:
                return c
        raise KeyError(variable)

    def __len__(self) -> int:
        return len(self.pairs)

    def __str__(self) -> str:
        inner = ", ".join(f"{v} = {c}" for v, c in sorted(self.pairs))
        return "{" + inner + "}"

    def __repr__(self) -> str:
        return f"Answer({self})"
