import pytest

from pronunciation_checker.core.feedback import (
    BANDS,
    EXCELLENT,
    GOOD,
    RETRY,
    FeedbackReport,
    classify,
    format_report,
)


@pytest.mark.parametrize(
    ("score", "band"),
    [
        (1.0, EXCELLENT),
        (0.90, EXCELLENT),
        (0.8999, GOOD),
        (0.75, GOOD),
        (0.7499, RETRY),
        (0.0, RETRY),
        (-3.0, RETRY),
    ],
)
def test_classify_uses_inclusive_lower_bounds(score, band):
    assert classify(score) is band


def test_bands_are_ordered_from_highest_threshold():
    thresholds = [band.threshold for band in BANDS]
    assert thresholds == sorted(thresholds, reverse=True)


def test_format_report_with_worst_word():
    report = FeedbackReport(
        reference="¿Me das un té con leche?",
        candidate="me da un te con leche",
        percentage=95,
        worst_word="da",
        message=EXCELLENT.message,
    )

    assert format_report(report) == (
        "Frase Objetivo: ¿Me das un té con leche?\n"
        "Frase Dicha: me da un te con leche\n"
        "Puntuación: 95%\n"
        "La palabra con más error de pronunciación podría ser: da\n"
        "¡Excelente pronunciación!"
    )


def test_format_report_omits_missing_worst_word():
    report = FeedbackReport(
        reference="Hola",
        candidate="",
        percentage=0,
        worst_word=None,
        message=RETRY.message,
    )

    rendered = report.render()

    assert "La palabra con más error" not in rendered
    assert rendered.splitlines() == [
        "Frase Objetivo: Hola",
        "Frase Dicha: ",
        "Puntuación: 0%",
        "No se entendió muy bien, intentá repetir.",
    ]
