"""
Text front end: Datalog source to the syntax tree in `tinydatalog.model`.
"""
from .datalog_parser import DatalogParser, DatalogTransformer, datalog_grammar

__all__ = ['DatalogParser', 'DatalogTransformer', 'datalog_grammar']
