"""Phrase pronunciation scoring based on normalized edit distance."""

from .core import (
    EvaluationResult,
    InvalidPhraseError,
    edit_distance,
    evaluate,
    normalize,
    similarity,
    worst_word,
)

__all__ = [
    "EvaluationResult",
    "InvalidPhraseError",
    "edit_distance",
    "evaluate",
    "normalize",
    "similarity",
    "worst_word",
]
