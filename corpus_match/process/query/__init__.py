# Path: corpus_match/process/query/__init__.py
"""
Query Compilation

Turns classification codes into PathQuery expressions.
"""

from .path_query import PathQuery, PrefixTest, xpath_literal
from .builder import build_cpc_query, build_uspc_query, build_query

__all__ = [
    'PathQuery',
    'PrefixTest',
    'xpath_literal',
    'build_cpc_query',
    'build_uspc_query',
    'build_query',
]
