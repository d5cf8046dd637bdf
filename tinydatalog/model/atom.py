from dataclasses import dataclass
from .terms import Term, Variable


@dataclass(frozen=True, slots=True)
class Atom:
    """
    A predicate applied to terms.
      - predicate: name of the relation, e.g. "parent"
      - terms: tuple of Term (Variable or Constant)
    """
    predicate: str
    terms: tuple[Term, ...] = ()

    def arity(self) -> int:
        return len(self.terms)

    def is_ground(self) -> bool:
        return all(not t.is_variable() for t in self.terms)

    def variables(self) -> list[Variable]:
        return [t for t in self.terms if isinstance(t, Variable)]

    def __repr__(self) -> str:
        inner = ", ".join(repr(t) for t in self.terms)
        return f"{self.predicate}({inner})"
