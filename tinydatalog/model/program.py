from dataclasses import dataclass
from typing import Union
from .atom import Atom
from .terms import Constant


@dataclass(frozen=True, slots=True)
class Fact:
    """
    A ground statement that a tuple of constants belongs to a relation.

    Example:
        father(vader, luke).
    """
    predicate: str
    constants: tuple[Constant, ...] = ()

    def arity(self) -> int:
        return len(self.constants)

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self.constants)
        return f"{self.predicate}({inner})."


@dataclass(frozen=True, slots=True)
class Rule:
    """
    A Datalog rule: the head holds whenever every body atom holds
    under one assignment of constants to the rule's variables.

    Example:
        ancestor(X, Y) :- parent(X, Z), ancestor(Z, Y).
    """
    head: Atom
    body: tuple[Atom, ...] = ()

    def __repr__(self) -> str:
        if self.body:
            body_str = ", ".join(repr(a) for a in self.body)
            return f"{repr(self.head)} :- {body_str}."
        return f"{repr(self.head)} :- ."


@dataclass(frozen=True, slots=True)
class Query:
    """
    A conjunction of atoms with no head, e.g. `?- father(X, luke).`
    """
    body: tuple[Atom, ...] = ()

    def __repr__(self) -> str:
        return "?- " + ", ".join(repr(a) for a in self.body) + "."


Statement = Union[Fact, Rule]


@dataclass(frozen=True, slots=True)
class Program:
    """
    An ordered sequence of facts and rules.
    """
    statements: tuple[Statement, ...] = ()

    def facts(self) -> list[Fact]:
        return [s for s in self.statements if isinstance(s, Fact)]

    def rules(self) -> list[Rule]:
        return [s for s in self.statements if isinstance(s, Rule)]

    def __len__(self) -> int:
        return len(self.statements)

    def __repr__(self) -> str:
        return "\n".join(repr(s) for s in self.statements)


def atom(predicate: str, *terms) -> Atom:
    return Atom(predicate=predicate, terms=tuple(terms))


def fact(predicate: str, *names: str) -> Fact:
    return Fact(predicate=predicate, constants=tuple(Constant(n) for n in names))


def rule(head: Atom, *body: Atom) -> Rule:
    return Rule(head=head, body=tuple(body))


def query(*body: Atom) -> Query:
    return Query(body=tuple(body))


def program(*statements: Statement) -> Program:
    return Program(statements=tuple(statements))
