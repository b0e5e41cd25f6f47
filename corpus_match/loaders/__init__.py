# Path: corpus_match/loaders/__init__.py
"""
INPUT layer: reading raw documents.
"""

from .document_reader import DocumentReader, LoadedDocument

__all__ = ['DocumentReader', 'LoadedDocument']
