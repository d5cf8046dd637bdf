import logging

import os
logger = logging.getLogger(__name__)
log_level_str = os.environ.get("DLG_DEBUG", "INFO").upper()
try:
    logger.setLevel(getattr(logging, log_level_str))
except AttributeError:
    logger.setLevel(logging.INFO)
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    formatter = logging.Formatter('[%(levelname)s] %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)

from typing import Optional
import pandas as pd
from tqdm import tqdm

from .answer import Answer
from .config import config
from .errors import FixpointNotReached, RelationArityMismatch
from .name_pool import NamePool
from .query import Query
from .rule import Rule
from ..model.program import Fact, Program, Query as QuerySyntax, Rule as RuleSyntax

Tuple = tuple[int, ...]


class DataSet:
    """
    Holds:
      - three name pools (relation, constant and variable names)
      - relations: one set of tuples per relation-name id
      - rules: compiled rules in declaration order
    Provides methods to ingest programs, saturate the facts to a fixpoint,
    answer queries, and load Datalog from files/strings.

    Evaluation is a brute-force search: every rule and query tries every
    assignment of known constants to its variables. Within one pass the
    rules run in declaration order and each writes its new facts straight
    into its head relation, so later rules already see them.
    """
    def __init__(
        self,
        check_arity: Optional[bool] = None,
        max_iterations: Optional[int] = None,
        max_candidates: Optional[int] = None,
        show_progress: Optional[bool] = None,
    ) -> None:
        self.check_arity = config.get_check_arity() if check_arity is None else check_arity
        self.max_iterations = config.get_max_iterations() if max_iterations is None else max_iterations
        self.max_candidates = config.get_max_candidates() if max_candidates is None else max_candidates
        self.show_progress = config.get_show_progress() if show_progress is None else show_progress

        self.relation_names = NamePool()
        self.constant_names = NamePool()
        self.variable_names = NamePool()

        # Indexed by relation-name id.
        self._relations: list[set[Tuple]] = []
        # None until a fact or rule fixes the arity.
        self._arities: list[Optional[int]] = []

        self.rules: list[Rule] = []
        self._last_len = 0
        self._last_constants = 0

    # ------------------------------------------------------------------
    # Size and state
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return sum(len(r) for r in self._relations)

    def fact_count(self) -> int:
        """The number of facts currently known, across all relations."""
        return len(self)

    def is_empty(self) -> bool:
        return len(self) == 0

    def is_dirty(self) -> bool:
        """True if rules may still derive facts not yet materialized."""
        # Head variables absent from the body range over every constant, so a
        # grown constant pool can make new head tuples derivable.
        return self._last_len != len(self) or self._last_constants != self.constant_count()

    def constant_count(self) -> int:
        return len(self.constant_names)

    def all_predicates(self) -> list[str]:
        return list(self.relation_names)

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def ingest(self, program: Program) -> None:
        """Add the facts and rules of `program`, in order."""
        for statement in program.statements:
            match statement:
                case Fact():
                    self.add_fact(statement)
                case RuleSyntax():
                    self.add_rule(statement)
                case _:
                    raise TypeError(f"Unexpected statement in program: {statement!r}")
        logger.debug(f"[INGEST] {len(program)} statements; now {len(self)} facts, {len(self.rules)} rules")

    def add_fact(self, fact: Fact) -> None:
        """
        Insert a ground fact into its relation, creating the relation if needed.
        Duplicates are ignored.
        """
        rel = self.declare_relation(fact.predicate, fact.arity(), where=f"fact '{fact!r}'")
        tuple_ = tuple(self.constant_names.intern(c.name) for c in fact.constants)
        self._relations[rel].add(tuple_)

    def add_rule(self, rule: RuleSyntax) -> None:
        """
        Compile `rule` against the current pools and append it. Any relation,
        constant or variable names it mentions are interned now.
        """
        compiled = Rule.build(rule, self)
        self.rules.append(compiled)
        # A new rule can derive facts even if the count has not moved.
        self._last_len = -1
        logger.debug(f"[INGEST] Added rule {rule!r} with {len(compiled.variables)} variables")

    def declare_relation(self, name: str, arity: int, where: str = "", fix_arity: bool = True) -> int:
        """
        Make sure relation `name` exists, adding an empty relation for it if
        not, and return its id. Declaring an existing name returns its id.

        The first fact or rule to mention a relation fixes its arity; a later
        reference with a different arity raises RelationArityMismatch unless
        arity checking is switched off. Queries pass fix_arity=False: they are
        checked against a known arity but leave an unknown one open.
        """
        rel = self.relation_names.intern(name)
        if rel == len(self._relations):
            self._relations.append(set())
            self._arities.append(arity if fix_arity else None)
        elif self._arities[rel] is None:
            if fix_arity:
                self._arities[rel] = arity
        elif self.check_arity and self._arities[rel] != arity:
            raise RelationArityMismatch(name, self._arities[rel], arity, where)
        return rel

    def contains(self, relation: int, tuple_: Tuple) -> bool:
        return tuple_ in self._relations[relation]

    # ------------------------------------------------------------------
    # Fixpoint
    # ------------------------------------------------------------------

    def run(self) -> int:
        """
        Apply the rules until no more facts appear. Returns the number of
        passes taken (0 if nothing had changed since the last run).
        """
        passes = 0
        while self.is_dirty():
            if self.max_iterations is not None and passes >= self.max_iterations:
                logger.error(f"[RUN] Exceeded max_iterations={self.max_iterations}.")
                raise FixpointNotReached(
                    f"Datalog evaluation exceeded max_iterations={self.max_iterations} "
                    f"with {len(self)} facts. Raise evaluation.max_iterations or set it to null "
                    f"to run until the fixpoint, which is always reached."
                )
            self._last_len = len(self)
            self._last_constants = self.constant_count()
            added = self.step(pass_number=passes)
            passes += 1
            logger.debug(f"[RUN] Pass {passes}: {added} new facts, {len(self)} total")
        logger.debug(f"[RUN] Fixpoint after {passes} passes with {len(self)} facts")
        return passes

    def step(self, pass_number: int = 0) -> int:
        """One pass over every rule in declaration order. Returns the number of new facts."""
        added = 0
        rules = tqdm(self.rules, desc=f"pass {pass_number + 1}", leave=False,
                     disable=not self.show_progress)
        for rule in rules:
            relation = self._relations[rule.relation]
            before = len(relation)
            relation |= rule.step(self)
            if len(relation) > before:
                logger.debug(f"[STEP] {rule.source!r}: {len(relation) - before} new facts")
            added += len(relation) - before
        return added

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def query(self, query: QuerySyntax) -> list[Answer]:
        """
        Answer `query` against the facts as they stand. Does not call run();
        saturate first or derivable facts will be missed.

        Names that appear in the query for the first time are interned, so
        the constant pool can grow here.
        """
        compiled = Query.build(query, self)
        answers: list[Answer] = []
        seen: set[Answer] = set()
        for binding in compiled.bindings(self):
            answer = Answer.from_binding(binding, compiled.variables, self)
            if answer not in seen:
                seen.add(answer)
                answers.append(answer)
        logger.debug(f"[QUERY] {query!r}: {len(answers)} answers")
        return answers

    # ------------------------------------------------------------------
    # Text I/O
    # ------------------------------------------------------------------

    def load_program_from_file(self, filepath: str) -> None:
        """
        Load a Datalog program (facts/rules) from a file and add to the data set.
        """
        with open(filepath, 'r') as f:
            program = f.read()
        self.load_program_from_string(program)

    def load_program_from_string(self, program_str: str) -> None:
        """
        Load a Datalog program (facts/rules) from a string and add to the data set.
        """
        from ..parser.datalog_parser import DatalogParser
        self.ingest(DatalogParser().parse_program(program_str))

    def query_from_string(self, query_str: str) -> list[Answer]:
        """Parse and answer a query such as `father(X, luke).`"""
        from ..parser.datalog_parser import DatalogParser
        return self.query(DatalogParser().parse_query(query_str))

    def facts(self, predicate: str) -> list[tuple[str, ...]]:
        """The facts of one relation as tuples of constant names, in sorted order."""
        rel = self.relation_names.get_id(predicate)
        if rel is None:
            raise KeyError(f"facts: no relation named '{predicate}'.")
        return [self._names_of(t) for t in sorted(self._relations[rel])]

    def get_relation(self, predicate: str) -> pd.DataFrame:
        """
        Return the facts of `predicate` as a DataFrame with columns arg0..argN-1.
        Raises KeyError if missing.
        """
        rel = self.relation_names.get_id(predicate)
        if rel is None:
            raise KeyError(f"get_relation: no relation named '{predicate}'.")
        rows = [self._names_of(t) for t in sorted(self._relations[rel])]
        width = max([self._arities[rel] or 0, *(len(r) for r in rows)])
        colnames = [f"arg{i}" for i in range(width)]
        return pd.DataFrame([list(r) for r in rows], columns=colnames, dtype=object)

    def render(self) -> str:
        """Every fact as `relation(c1, c2).`, one per line."""
        lines = []
        for rel, relation in enumerate(self._relations):
            name = self.relation_names[rel]
            for tuple_ in sorted(relation):
                lines.append(f"{name}({', '.join(self._names_of(tuple_))}).\n")
        return "".join(lines)

    def _names_of(self, tuple_: Tuple) -> tuple[str, ...]:
        return tuple(self.constant_names[c] for c in tuple_)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"DataSet(relations={len(self._relations)}, facts={len(self)}, "
                f"rules={len(self.rules)}, constants={self.constant_count()})")
