import logging

import pytest
from prometheus_client import REGISTRY

from pronunciation_checker.app.services.evaluation_service import PronunciationEvaluator
from pronunciation_checker.core import InvalidPhraseError


def _sample(name, labels=None):
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


def test_evaluator_counts_evaluations_by_band(evaluator):
    before = _sample("pronunciation_evaluations_total", {"band": "excellent"})

    result = evaluator.evaluate("Quiero un capuchino, por favor.", "quiero un capuchino por favor")

    assert result.percentage == 100
    assert _sample("pronunciation_evaluations_total", {"band": "excellent"}) == before + 1


def test_evaluator_records_latency(evaluator):
    before = _sample("pronunciation_evaluation_seconds_count")

    evaluator.evaluate("Te pido un chocolate", "te pido un chocolate")

    assert _sample("pronunciation_evaluation_seconds_count") == before + 1


def test_evaluators_share_registered_metrics():
    first = PronunciationEvaluator()
    second = PronunciationEvaluator()

    assert first._metric_evaluations is second._metric_evaluations


def test_evaluator_logs_structured_outcome(evaluator, caplog):
    caplog.set_level(logging.DEBUG, logger="pronunciation_checker")

    evaluator.evaluate(
        "¿Me traés un café con leche, por favor?",
        "me traigo un cafe con leche por favor",
    )

    messages = [record.getMessage() for record in caplog.records]
    assert any(
        message.startswith("Pronunciation evaluated |")
        and '"percentage": 92' in message
        and '"worst_word": "traigo"' in message
        and '"component": "pronunciation_evaluator"' in message
        for message in messages
    )
    assert any("Puntuación: 92%" in message for message in messages)


def test_evaluator_logs_counts_and_reraises_failures(evaluator, caplog):
    caplog.set_level(logging.INFO, logger="pronunciation_checker")
    before = _sample("pronunciation_evaluation_failures_total")

    with pytest.raises(InvalidPhraseError):
        evaluator.evaluate(None, "hola")

    assert _sample("pronunciation_evaluation_failures_total") == before + 1
    failures = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert failures
    assert "Pronunciation evaluation failed" in failures[-1].getMessage()
    assert "InvalidPhraseError" in failures[-1].getMessage()


def test_evaluator_transcriber_can_be_swapped(evaluator):
    def merge_b_and_v(text):
        return text.replace("v", "b")

    assert evaluator.evaluate("vaca", "baca").percentage == 75

    evaluator.set_transcriber(merge_b_and_v)
    assert evaluator.evaluate("vaca", "baca").percentage == 100

    evaluator.set_transcriber(None)
    assert evaluator.evaluate("vaca", "baca").percentage == 75
