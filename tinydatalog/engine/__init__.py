"""
Brute-force bottom-up evaluation engine.
"""
from .answer import Answer
from .binding import Binding
from .config import Config, config
from .counter import Counter
from .data_set import DataSet
from .errors import (
    DatalogError,
    DatalogSyntaxError,
    EmptyRuleBody,
    FixpointNotReached,
    RelationArityMismatch,
    SearchSpaceTooLarge,
)
from .name_pool import NamePool

__all__ = [
    'Answer', 'Binding', 'Config', 'config', 'Counter', 'DataSet', 'NamePool',
    'DatalogError', 'DatalogSyntaxError', 'EmptyRuleBody', 'FixpointNotReached',
    'RelationArityMismatch', 'SearchSpaceTooLarge',
]
