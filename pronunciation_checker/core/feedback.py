"""Qualitative bands and the rendered feedback report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class SimilarityBand:
    """A qualitative grade covering similarities at or above ``threshold``."""

    name: str
    threshold: float
    message: str


EXCELLENT = SimilarityBand("excellent", 0.90, "¡Excelente pronunciación!")
GOOD = SimilarityBand("good", 0.75, "Bien, pero podrías mejorar la pronunciación.")
RETRY = SimilarityBand("retry", float("-inf"), "No se entendió muy bien, intentá repetir.")

# Ordered from the highest threshold down; the first match wins.
BANDS: Tuple[SimilarityBand, ...] = (EXCELLENT, GOOD, RETRY)


def classify(score: float) -> SimilarityBand:
    """Return the band whose inclusive lower bound ``score`` reaches."""

    for band in BANDS:
        if score >= band.threshold:
            return band
    return RETRY


@dataclass(frozen=True)
class FeedbackReport:
    """Everything shown to the learner after a single attempt."""

    reference: str
    candidate: str
    percentage: int
    worst_word: Optional[str]
    message: str

    def render(self) -> str:
        return format_report(self)


def format_report(report: FeedbackReport) -> str:
    """Render ``report`` with the fixed Spanish template."""

    lines = [
        f"Frase Objetivo: {report.reference}",
        f"Frase Dicha: {report.candidate}",
        f"Puntuación: {report.percentage}%",
    ]
    if report.worst_word:
        lines.append(
            f"La palabra con más error de pronunciación podría ser: {report.worst_word}"
        )
    lines.append(report.message)
    return "\n".join(lines)


__all__ = [
    "BANDS",
    "EXCELLENT",
    "GOOD",
    "RETRY",
    "FeedbackReport",
    "SimilarityBand",
    "classify",
    "format_report",
]
