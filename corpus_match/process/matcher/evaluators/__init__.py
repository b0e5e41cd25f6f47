# Path: corpus_match/process/matcher/evaluators/__init__.py
"""
Document Evaluators

- StructuralEvaluator: streaming tag scan over raw markup (default)
- XPathEvaluator: lxml XPath over a recovered tree
"""

from ....constants import ENGINE_STRUCTURAL, ENGINE_XPATH, SUPPORTED_ENGINES
from .base_evaluator import BaseEvaluator
from .structural_evaluator import StructuralEvaluator
from .xpath_evaluator import XPathEvaluator


EVALUATORS = {
    ENGINE_STRUCTURAL: StructuralEvaluator,
    ENGINE_XPATH: XPathEvaluator,
}


def create_evaluator(engine: str = ENGINE_STRUCTURAL) -> BaseEvaluator:
    """
    Create the evaluator for an engine name.

    Raises:
        ValueError: If the engine is unknown
    """
    try:
        return EVALUATORS[engine.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown evaluation engine: {engine!r} "
            f"(expected one of {', '.join(SUPPORTED_ENGINES)})"
        ) from None


__all__ = [
    'BaseEvaluator',
    'StructuralEvaluator',
    'XPathEvaluator',
    'create_evaluator',
]
