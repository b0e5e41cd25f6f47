# Path: corpus_match/process/matcher/models/__init__.py
"""
Matcher Models
"""

from .match_result import MatchResult

__all__ = ['MatchResult']
