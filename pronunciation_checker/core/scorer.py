"""Similarity scoring between a target phrase and what was actually said."""

from __future__ import annotations

from typing import Any, Optional

from .edit_distance import edit_distance
from .normalizer import normalize, split_words
from .transcription import PhoneticTranscriber, identity_transcription


class InvalidPhraseError(ValueError):
    """Raised when a reference or spoken phrase is missing or not text."""


def require_phrase(value: Any, role: str) -> str:
    if value is None:
        raise InvalidPhraseError(f"{role} phrase is required")
    if not isinstance(value, str):
        raise InvalidPhraseError(
            f"{role} phrase must be a string, got {type(value).__name__}"
        )
    return value


def distance_ratio(reference: str, candidate: str) -> float:
    """Return ``1 - distance / len(reference)`` for already-normalized text.

    The denominator is the reference length only, so a candidate much longer
    than the reference scores below zero. An empty reference scores ``1.0``
    against an empty candidate and ``0.0`` against anything else.
    """

    if not reference:
        return 1.0 if not candidate else 0.0
    return 1.0 - edit_distance(reference, candidate) / len(reference)


def similarity(
    reference: str,
    candidate: str,
    *,
    transcriber: Optional[PhoneticTranscriber] = None,
) -> float:
    """Score how closely ``candidate`` reproduces ``reference``."""

    reference = require_phrase(reference, "reference")
    candidate = require_phrase(candidate, "candidate")
    transcribe = transcriber or identity_transcription

    phonetic_reference = transcribe(normalize(reference))
    phonetic_candidate = transcribe(normalize(candidate))
    return distance_ratio(phonetic_reference, phonetic_candidate)


def percentage(score: float) -> int:
    """Convert a similarity ratio to a whole percentage (round half to even)."""

    return int(round(score * 100))


def worst_word(reference: str, candidate: str) -> Optional[str]:
    """Return the spoken word that least resembles its positional counterpart.

    Words are paired by index up to the shorter phrase; trailing words on either
    side are ignored. Ties keep the earliest word, and ``None`` is returned when
    every paired word matches exactly.
    """

    reference = require_phrase(reference, "reference")
    candidate = require_phrase(candidate, "candidate")

    reference_words = split_words(normalize(reference))
    candidate_words = split_words(normalize(candidate))

    worst: Optional[str] = None
    worst_score = 1.0
    for ref_word, spoken_word in zip(reference_words, candidate_words):
        score = distance_ratio(ref_word, spoken_word)
        if score < worst_score:
            worst_score = score
            worst = spoken_word
    return worst


__all__ = [
    "InvalidPhraseError",
    "distance_ratio",
    "percentage",
    "require_phrase",
    "similarity",
    "worst_word",
]
