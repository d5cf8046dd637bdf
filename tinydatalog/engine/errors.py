"""
Exceptions raised by the Datalog engine and parser.
"""


class DatalogError(Exception):
    """Base class for every error raised by tinydatalog."""


class RelationArityMismatch(DatalogError, ValueError):
    """A relation was referenced with a different number of terms than before."""

    def __init__(self, relation: str, expected: int, found: int, where: str = "") -> None:
        self.relation = relation
        self.expected = expected
        self.found = found
        msg = (f"arity mismatch for relation '{relation}': "
               f"previously seen arity {expected}, now seen arity {found}")
        if where:
            msg += f" in {where}"
        super().__init__(msg)


class EmptyRuleBody(DatalogError, ValueError):
    """A rule was declared without any body atoms."""

    def __init__(self, rule) -> None:
        self.rule = rule
        super().__init__(f"rule '{rule!r}' has an empty body; state it as a fact instead")


class DatalogSyntaxError(DatalogError, ValueError):
    """Source text could not be parsed."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class FixpointNotReached(DatalogError, RuntimeError):
    """Fixpoint iteration exceeded the configured number of passes."""


class SearchSpaceTooLarge(DatalogError, RuntimeError):
    """A rule or query would enumerate more candidate bindings than allowed."""
