"""
Type-specific question evaluators.

Importing this package registers every evaluator in the global registry.
"""

from .choice import ChoiceEvaluator
from .essay import EssayEvaluator
from .text import TextEvaluator

__all__ = [
    "ChoiceEvaluator",
    "TextEvaluator",
    "EssayEvaluator",
]
