"""Evaluation service wrapping the scoring core with logging, metrics and tracing."""

from __future__ import annotations

from typing import Optional

from pronunciation_checker.core import (
    EvaluationResult,
    PhoneticTranscriber,
    evaluate,
    identity_transcription,
)

from ...utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)


class PronunciationEvaluator:
    """Scores spoken attempts and reports each outcome to the observability stack."""

    def __init__(self, *, transcriber: Optional[PhoneticTranscriber] = None) -> None:
        self.transcriber: PhoneticTranscriber = transcriber or identity_transcription

        self._logger = get_logger(__name__).bind(
            component="pronunciation_evaluator",
            transcriber=getattr(self.transcriber, "__name__", type(self.transcriber).__name__),
        )

        self._metric_evaluations = create_counter(
            "pronunciation_evaluations_total",
            "Completed pronunciation evaluations by feedback band.",
            label_names=("band",),
        )
        self._metric_failures = create_counter(
            "pronunciation_evaluation_failures_total",
            "Pronunciation evaluations that raised an exception.",
        )
        self._metric_duration = create_histogram(
            "pronunciation_evaluation_seconds",
            "Latency of pronunciation evaluations.",
        )

    def set_transcriber(self, transcriber: Optional[PhoneticTranscriber]) -> None:
        self.transcriber = transcriber or identity_transcription
        self._logger = self._logger.bind(
            transcriber=getattr(self.transcriber, "__name__", type(self.transcriber).__name__)
        )

    def evaluate(self, reference: str, candidate: str) -> EvaluationResult:
        """Score ``candidate`` against ``reference``.

        Invalid input is logged, counted and re-raised to the caller.
        """

        with start_span("pronunciation.evaluate") as span:
            try:
                with self._metric_duration.time():
                    result = evaluate(reference, candidate, transcriber=self.transcriber)
            except Exception as exc:
                self._metric_failures.inc()
                record_exception(span, exc)
                self._logger.error(
                    "Pronunciation evaluation failed",
                    context={"error": str(exc), "error_type": type(exc).__name__},
                )
                raise

            self._metric_evaluations.labels(band=result.band.name).inc()
            add_span_attributes(
                span,
                {
                    "percentage": result.percentage,
                    "band": result.band.name,
                    "has_worst_word": result.worst_word is not None,
                },
            )

        self._logger.info(
            "Pronunciation evaluated",
            context={
                "percentage": result.percentage,
                "band": result.band.name,
                "worst_word": result.worst_word,
            },
        )
        self._logger.debug(result.rendered_report)
        return result


__all__ = ["PronunciationEvaluator"]
