import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pronunciation_checker.app.data.phrases import PhraseSequence
from pronunciation_checker.app.services.evaluation_service import PronunciationEvaluator


@pytest.fixture
def evaluator():
    """Evaluator using the default identity transcription."""

    return PronunciationEvaluator()


@pytest.fixture
def short_sequence():
    """Three-phrase sequence for cursor and UI tests."""

    return PhraseSequence(
        [
            "Quiero un capuchino, por favor.",
            "¿Me das un té con leche?",
            "Te pido un chocolate caliente con churros.",
        ]
    )
