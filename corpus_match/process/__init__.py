# Path: corpus_match/process/__init__.py
"""
PROCESS layer: query compilation and matching.
"""
