"""One-shot evaluation of a spoken attempt against its target phrase."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .feedback import FeedbackReport, SimilarityBand, classify
from .scorer import percentage, require_phrase, similarity, worst_word
from .transcription import PhoneticTranscriber


@dataclass(frozen=True)
class EvaluationResult:
    """Scores plus the rendered report for a single attempt."""

    report: FeedbackReport
    similarity: float
    band: SimilarityBand
    rendered_report: str

    @property
    def percentage(self) -> int:
        return self.report.percentage

    @property
    def worst_word(self) -> Optional[str]:
        return self.report.worst_word

    @property
    def message(self) -> str:
        return self.report.message

    def as_dict(self) -> Dict[str, Any]:
        return {
            "percentage": self.percentage,
            "worst_word": self.worst_word,
            "message": self.message,
            "rendered_report": self.rendered_report,
        }


def evaluate(
    reference: str,
    candidate: str,
    *,
    transcriber: Optional[PhoneticTranscriber] = None,
) -> EvaluationResult:
    """Score ``candidate`` against ``reference`` and build the feedback report.

    Raises:
        InvalidPhraseError: if either phrase is missing or not a string.
    """

    reference = require_phrase(reference, "reference")
    candidate = require_phrase(candidate, "candidate")

    score = similarity(reference, candidate, transcriber=transcriber)
    band = classify(score)
    report = FeedbackReport(
        reference=reference,
        candidate=candidate,
        percentage=percentage(score),
        # an empty spoken word is reported as no word at all
        worst_word=worst_word(reference, candidate) or None,
        message=band.message,
    )
    return EvaluationResult(
        report=report,
        similarity=score,
        band=band,
        rendered_report=report.render(),
    )


__all__ = ["EvaluationResult", "evaluate"]
