from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from .binding import Binding
from ..model.atom import Atom
from ..model.terms import Constant, Variable

if TYPE_CHECKING:
    from .data_set import DataSet


@dataclass(frozen=True, slots=True)
class ConstantId:
    """A term fixed to one interned constant."""
    id: int


@dataclass(frozen=True, slots=True)
class VariableSlot:
    """A term standing for the value held in one slot of a value binding."""
    slot: int


GoalTerm = Union[ConstantId, VariableSlot]


@dataclass(frozen=True, slots=True)
class Goal:
    """
    One relation reference with its terms resolved to ids.
      - relation: relation-name id
      - terms: ConstantId or VariableSlot per position
    """
    relation: int
    terms: tuple[GoalTerm, ...]

    @classmethod
    def build(cls, atom: Atom, variables: Binding, data: DataSet, where: str = "",
              fix_arity: bool = True) -> Goal:
        """
        Resolve `atom` against the data set's pools. Interns the relation,
        constant and variable names it mentions and assigns each new variable
        a slot in `variables`.
        """
        relation = data.declare_relation(atom.predicate, atom.arity(), where=where or repr(atom),
                                         fix_arity=fix_arity)
        terms: list[GoalTerm] = []
        for t in atom.terms:
            match t:
                case Constant():
                    terms.append(ConstantId(data.constant_names.intern(t.name)))
                case Variable():
                    var_name_id = data.variable_names.intern(t.name)
                    terms.append(VariableSlot(variables.insert(var_name_id)))
                case _:
                    raise TypeError(f"Unexpected term in atom {atom!r}: {t!r}")
        return cls(relation=relation, terms=tuple(terms))

    def make_tuple(self, binding: Binding) -> tuple[int, ...]:
        """Ground this goal: substitute each variable slot with its value from `binding`."""
        elements = []
        for term in self.terms:
            match term:
                case ConstantId(id=c):
                    elements.append(c)
                case VariableSlot(slot=v):
                    elements.append(binding[v])
        return tuple(elements)

    def is_satisfied_by(self, binding: Binding, data: DataSet) -> bool:
        return data.contains(self.relation, self.make_tuple(binding))

    def slots(self) -> set[int]:
        return {t.slot for t in self.terms if isinstance(t, VariableSlot)}
