import logging
logger = logging.getLogger("tinydatalog.parser")
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    logger.addHandler(handler)
logger.setLevel(logging.WARNING)

from typing import Union

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput, VisitError

from ..engine.errors import DatalogSyntaxError
from ..model.atom import Atom
from ..model.program import Fact, Program, Query, Rule
from ..model.terms import Constant, is_constant_name, term_from_name

datalog_grammar = r"""
// -----------------------------
// A program is zero or more facts or rules, each ended by "."
// (the "." after the last statement may be left off)
// -----------------------------
program: (statement ".")* statement?

?statement: fact | rule

// Facts:  parent(padme, luke)
fact: atom

// Rules:  ancestor(X, Y) :- parent(X, Z), ancestor(Z, Y)
rule: atom ":-" body

// Body: zero or more atoms separated by commas; a trailing comma is allowed
body: (atom ("," atom)* ","?)?

// Queries:  ?- father(X, luke).
query: "?-"? atom ("," atom)* "."?

// Atom: NAME "(" [ NAME ("," NAME)* ] ")"
atom: NAME "(" (NAME ("," NAME)* ","?)? ")"

// Constants and variables share one token; case decides which is which
NAME: /[A-Za-z_][A-Za-z0-9_]*/

%ignore /%[^\n]*/
%ignore /#[^\n]*/
%ignore /\/\/[^\n]*/
%import common.WS
%ignore WS
"""


class DatalogTransformer(Transformer):
    """
    Transforms a Lark parse tree into the syntax tree in `tinydatalog.model`.

    A name is a constant when it has at least one letter and every letter is
    lowercase; anything else is a variable. Relation names and fact
    arguments must be constants.
    """

    def program(self, items):
        logger.debug("Entering program with items: %s", items)
        return Program(statements=tuple(items))

    @v_args(meta=True)
    def fact(self, meta, items):
        atom = items[0]
        for t in atom.terms:
            if t.is_variable():
                raise DatalogSyntaxError(f"expected a constant but found variable `{t.name}`",
                                         meta.line, meta.column)
        result = Fact(predicate=atom.predicate, constants=tuple(Constant(t.name) for t in atom.terms))
        logger.debug("fact result: %s", result)
        return result

    def rule(self, items):
        head, body = items
        result = Rule(head=head, body=body)
        logger.debug("rule result: %s", result)
        return result

    def body(self, items):
        return tuple(items)

    def query(self, items):
        result = Query(body=tuple(items))
        logger.debug("query result: %s", result)
        return result

    def atom(self, items):
        name_tok, *term_toks = items
        if not is_constant_name(str(name_tok)):
            raise DatalogSyntaxError(f"expected a relation but found variable `{name_tok}`",
                                     name_tok.line, name_tok.column)
        result = Atom(predicate=str(name_tok), terms=tuple(term_from_name(str(t)) for t in term_toks))
        logger.debug("atom result: %s", result)
        return result


class DatalogParser:
    def __init__(self):
        self.parser = Lark(datalog_grammar, start=["program", "query"], parser="lalr",
                           propagate_positions=True)
        self.transformer = DatalogTransformer()

    def parse_program(self, text: str) -> Program:
        return self._parse(text, "program")

    def parse_query(self, text: str) -> Query:
        return self._parse(text, "query")

    def parse(self, text: str) -> Union[Program, Query]:
        """
        Parse one interactive input: a program if it reads as one, otherwise
        a query. `father(X, luke).` is a query because a fact cannot hold a
        variable; prefix `?-` to force a query.
        """
        try:
            return self.parse_program(text)
        except DatalogSyntaxError as program_error:
            try:
                return self.parse_query(text)
            except DatalogSyntaxError:
                raise program_error from None

    def _parse(self, text: str, start: str):
        logger.debug("Starting %s parse for text:\n%s", start, text)
        try:
            parse_tree = self.parser.parse(text, start=start)
        except UnexpectedInput as e:
            line = e.line if isinstance(e.line, int) and e.line > 0 else None
            raise DatalogSyntaxError(_describe(e, text), line, e.column if line else None) from None
        try:
            result = self.transformer.transform(parse_tree)
        except VisitError as e:
            if isinstance(e.orig_exc, DatalogSyntaxError):
                raise e.orig_exc from None
            raise
        logger.debug("Final AST:\n%s", result)
        return result


def _describe(e: UnexpectedInput, text: str) -> str:
    has_position = isinstance(e.line, int) and e.line > 0
    context = e.get_context(text).strip() if has_position else ""
    first = str(e).splitlines()[0] if str(e) else type(e).__name__
    if context:
        return f"{first}\n{context}"
    return first
