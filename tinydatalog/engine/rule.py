from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .binding import Binding
from .errors import EmptyRuleBody
from .goal import Goal
from .query import candidate_bindings, satisfies_all
from ..model.program import Rule as RuleSyntax

if TYPE_CHECKING:
    from .data_set import DataSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Rule:
    """
    A compiled rule: a head goal and body goals over one shared variable binding.

    Variables are numbered head first, then body, in order of first appearance.
    A rule is built once against the data set's pools and only reads
    relations afterwards.
    """
    head: Goal
    body: tuple[Goal, ...]
    variables: Binding
    source: RuleSyntax

    @classmethod
    def build(cls, rule: RuleSyntax, data: DataSet) -> Rule:
        if not rule.body:
            raise EmptyRuleBody(rule)
        where = f"rule '{rule!r}'"
        variables = Binding()
        head = Goal.build(rule.head, variables, data, where=where)
        body = tuple(Goal.build(a, variables, data, where=where) for a in rule.body)

        body_slots: set[int] = set()
        for goal in body:
            body_slots |= goal.slots()
        unbound = head.slots() - body_slots
        if unbound:
            names = sorted(data.variable_names[variables[s]] for s in unbound)
            logger.warning(f"[RULE] {rule!r}: head variables {names} do not occur in the body "
                           f"and will range over every known constant")
        return cls(head=head, body=body, variables=variables, source=rule)

    @property
    def relation(self) -> int:
        return self.head.relation

    def step(self, data: DataSet) -> set[tuple[int, ...]]:
        """The head tuples derivable from the relations as they currently stand."""
        derived: set[tuple[int, ...]] = set()
        for binding in candidate_bindings(len(self.variables), data):
            if satisfies_all(binding, self.body, data):
                derived.add(self.head.make_tuple(binding))
        return derived

    def __repr__(self) -> str:
        return f"Rule({self.source!r})"
