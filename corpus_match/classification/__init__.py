# Path: corpus_match/classification/__init__.py
"""
Classification Codes

Scheme-tagged CPC and USPC value types consumed by the query builder.
"""

from .codes import (
    ClassificationScheme,
    CpcClassification,
    UspcClassification,
    ClassificationCode,
    filter_by_scheme,
)

__all__ = [
    'ClassificationScheme',
    'CpcClassification',
    'UspcClassification',
    'ClassificationCode',
    'filter_by_scheme',
]
