"""
tinydatalog: a minimal brute-force Datalog evaluator.
"""
from .engine import (
    Answer,
    DataSet,
    DatalogError,
    DatalogSyntaxError,
    EmptyRuleBody,
    FixpointNotReached,
    RelationArityMismatch,
    SearchSpaceTooLarge,
    config,
)
from .model import Atom, Constant, Fact, Program, Query, Rule, Variable
from .parser import DatalogParser

__all__ = [
    'Answer', 'DataSet', 'DatalogParser', 'config',
    'Atom', 'Constant', 'Fact', 'Program', 'Query', 'Rule', 'Variable',
    'DatalogError', 'DatalogSyntaxError', 'EmptyRuleBody', 'FixpointNotReached',
    'RelationArityMismatch', 'SearchSpaceTooLarge',
]
