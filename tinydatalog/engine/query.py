from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Sequence

from .binding import Binding
from .counter import Counter
from .errors import SearchSpaceTooLarge
from .goal import Goal
from ..model.program import Query as QuerySyntax

if TYPE_CHECKING:
    from .data_set import DataSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Query:
    """
    A compiled query: body goals sharing one variable binding, with no head.

    `variables` maps each slot to the variable-name id it was created for,
    in order of first appearance.
    """
    goals: tuple[Goal, ...]
    variables: Binding
    source: QuerySyntax

    @classmethod
    def build(cls, query: QuerySyntax, data: DataSet) -> Query:
        variables = Binding()
        where = f"query '{query!r}'"
        goals = tuple(Goal.build(a, variables, data, where=where, fix_arity=False) for a in query.body)
        return cls(goals=goals, variables=variables, source=query)

    def bindings(self, data: DataSet) -> list[Binding]:
        """
        Every value binding that satisfies all goals, deduplicated and sorted.
        A query without goals has no answers.
        """
        if not self.goals:
            return []
        found = {b.values() for b in candidate_bindings(len(self.variables), data)
                 if satisfies_all(b, self.goals, data)}
        logger.debug(f"[QUERY] {self.source!r}: {len(found)} satisfying bindings")
        return [Binding(values) for values in sorted(found)]


def candidate_bindings(num_variables: int, data: DataSet) -> Iterator[Binding]:
    """
    Every assignment of interned constants to `num_variables` slots.

    With no variables there is exactly one assignment, the empty binding,
    so that ground rules and queries are still tested once.
    """
    if num_variables == 0:
        yield Binding()
        return
    counter = Counter(num_variables, data.constant_count())
    limit = data.max_candidates
    if limit is not None and len(counter) > limit:
        raise SearchSpaceTooLarge(
            f"{data.constant_count()} constants over {num_variables} variables gives "
            f"{len(counter)} candidate bindings, more than the limit of {limit}"
        )
    for values in counter:
        yield Binding(values)


def satisfies_all(binding: Binding, goals: Sequence[Goal], data: DataSet) -> bool:
    for goal in goals:
        if not goal.is_satisfied_by(binding, data):
            return False
    return True
