"""Core scoring utilities for the pronunciation checker."""

from .edit_distance import edit_distance
from .evaluation import EvaluationResult, evaluate
from .feedback import (
    BANDS,
    FeedbackReport,
    SimilarityBand,
    classify,
    format_report,
)
from .normalizer import ACCENTED_VOWELS, normalize, split_words
from .scorer import (
    InvalidPhraseError,
    distance_ratio,
    percentage,
    similarity,
    worst_word,
)
from .transcription import PhoneticTranscriber, identity_transcription

__all__ = [
    "ACCENTED_VOWELS",
    "BANDS",
    "EvaluationResult",
    "FeedbackReport",
    "InvalidPhraseError",
    "PhoneticTranscriber",
    "SimilarityBand",
    "classify",
    "distance_ratio",
    "edit_distance",
    "evaluate",
    "format_report",
    "identity_transcription",
    "normalize",
    "percentage",
    "similarity",
    "split_words",
    "worst_word",
]
