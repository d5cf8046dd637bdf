from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Term:
    """
    Base class for Datalog terms (either a Constant or a Variable).
    """
    name: str

    def is_variable(self) -> bool:
        return isinstance(self, Variable)

    def is_constant(self) -> bool:
        return isinstance(self, Constant)

    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Constant(Term):
    """
    A Datalog constant, e.g. luke, vader, a1.
    Constants are plain names; the engine interns them into dense ids.
    """
    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Variable(Term):
    """
    A Datalog variable, e.g. X, Y, Parent. The `name` is the variable's identifier.
    """
    def __repr__(self) -> str:
        return self.name


def is_constant_name(name: str) -> bool:
    """A name reads as a constant if it has at least one letter and all of its letters are lowercase."""
    has_letter = False
    for ch in name:
        if ch.isascii() and ch.isalpha():
            if not ch.islower():
                return False
            has_letter = True
    return has_letter


def term_from_name(name: str) -> Term:
    if is_constant_name(name):
        return Constant(name)
    return Variable(name)
