"""
Syntax tree consumed by the evaluation engine.
"""
from .terms import Term, Constant, Variable, is_constant_name, term_from_name
from .atom import Atom
from .program import Fact, Rule, Query, Program, Statement, atom, fact, rule, query, program

__all__ = [
    'Term', 'Constant', 'Variable', 'is_constant_name', 'term_from_name',
    'Atom', 'Fact', 'Rule', 'Query', 'Program', 'Statement',
    'atom', 'fact', 'rule', 'query', 'program',
]
