import pytest

from tinydatalog.engine.data_set import DataSet
from tinydatalog.engine.errors import DatalogSyntaxError, EmptyRuleBody
from tinydatalog.model import (
    Atom, Constant, Fact, Program, Query, Rule, Variable, is_constant_name,
)
from tinydatalog.parser import DatalogParser


@pytest.fixture
def parser():
    return DatalogParser()


def test_is_constant_name():
    assert is_constant_name("name")
    assert is_constant_name("a1")
    assert is_constant_name("a_b")
    assert not is_constant_name("Name")
    assert not is_constant_name("_")
    assert not is_constant_name("_9")
    assert not is_constant_name("aB")


def test_empty_program(parser):
    assert parser.parse_program("") == Program(())


def test_parse_fact(parser):
    prog = parser.parse_program(" fact ( a, b, c ) ")
    assert prog.statements == (
        Fact("fact", (Constant("a"), Constant("b"), Constant("c"))),
    )


def test_parse_rule(parser):
    prog = parser.parse_program("ancestor(X, Y) :- parent(X, Z), ancestor(Z, Y).")
    expected = Rule(
        Atom("ancestor", (Variable("X"), Variable("Y"))),
        (
            Atom("parent", (Variable("X"), Variable("Z"))),
            Atom("ancestor", (Variable("Z"), Variable("Y"))),
        ),
    )
    assert prog.statements == (expected,)
    assert repr(expected) == "ancestor(X, Y) :- parent(X, Z), ancestor(Z, Y)."


def test_last_statement_may_omit_the_dot(parser):
    prog = parser.parse_program("p(a). p(b)")
    assert len(prog) == 2
    assert [repr(s) for s in prog.facts()] == ["p(a).", "p(b)."]


def test_comments_are_ignored(parser):
    prog = parser.parse_program("""
        % a comment
        p(a).  # another
        // and another
        q(X) :- p(X).
    """)
    assert len(prog.facts()) == 1
    assert len(prog.rules()) == 1


def test_fact_with_variable_is_a_syntax_error(parser):
    with pytest.raises(DatalogSyntaxError, match="expected a constant"):
        parser.parse_program("father(X, luke).")


def test_relation_named_like_a_variable_is_a_syntax_error(parser):
    with pytest.raises(DatalogSyntaxError, match="expected a relation"):
        parser.parse_program("Father(vader, luke).")


def test_syntax_error_reports_position(parser):
    with pytest.raises(DatalogSyntaxError) as exc:
        parser.parse_program("p(a).\n$(b).")
    assert exc.value.line == 2
    assert exc.value.column == 1


def test_parse_query_with_and_without_prefix(parser):
    expected = Query((Atom("father", (Variable("X"), Constant("luke"))),))
    assert parser.parse_query("father(X, luke)") == expected
    assert parser.parse_query("?- father(X, luke).") == expected


def test_parse_falls_back_to_query(parser):
    assert isinstance(parser.parse("father(X, luke)."), Query)
    assert isinstance(parser.parse("p(X), q(X)"), Query)
    assert isinstance(parser.parse("?- p(a)."), Query)
    assert isinstance(parser.parse("father(vader, luke)."), Program)


def test_parse_reports_program_error_when_neither_form_fits(parser):
    with pytest.raises(DatalogSyntaxError):
        parser.parse("p(a) :- q(")
    with pytest.raises(DatalogSyntaxError):
        parser.parse("p(")


def test_empty_body_rule_parses_but_is_not_ingested(parser):
    prog = parser.parse_program("p(a) :- .")
    assert prog.statements == (Rule(Atom("p", (Constant("a"),)), ()),)
    with pytest.raises(EmptyRuleBody):
        DataSet().ingest(prog)
