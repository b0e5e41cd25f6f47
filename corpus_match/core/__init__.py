# Path: corpus_match/core/__init__.py
"""
corpus_match Core Package

Core utilities shared across the package.

Submodules:
    - logger: IPO-aware logging system
"""
