"""Application wiring for the pronunciation checker."""

from __future__ import annotations

from typing import Iterable, Optional

if __package__ in {None, ""}:
    import sys
    from pathlib import Path

    repo_root = Path(__file__).resolve().parents[2]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))

from pronunciation_checker.config import Settings, load_settings
from pronunciation_checker.core import EvaluationResult, PhoneticTranscriber
from pronunciation_checker.utils.logging_config import configure_logging
from pronunciation_checker.utils.observability import get_logger

from pronunciation_checker.app.data.phrases import PhraseSequence
from pronunciation_checker.app.services.evaluation_service import PronunciationEvaluator
from pronunciation_checker.app.ui.gradio import create_interface


class PronunciationCheckerApp:
    """High-level application facade bundling dependencies."""

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        phrases: Optional[Iterable[str]] = None,
        evaluator: Optional[PronunciationEvaluator] = None,
        transcriber: Optional[PhoneticTranscriber] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self._logger = get_logger(__name__).bind(component="app_facade")

        self.phrases = PhraseSequence(phrases)
        self.evaluator = evaluator or PronunciationEvaluator(transcriber=transcriber)
        if evaluator is not None and transcriber is not None:
            self.evaluator.set_transcriber(transcriber)

        self._logger.info(
            "Application dependencies wired",
            context={
                "phrases": len(self.phrases),
                "advance_delay": self.settings.advance_delay,
            },
        )

    # Dependency management -------------------------------------------------
    def set_transcriber(self, transcriber: Optional[PhoneticTranscriber]) -> None:
        self.evaluator.set_transcriber(transcriber)

    # Public API ------------------------------------------------------------
    def evaluate(self, reference: str, candidate: str) -> EvaluationResult:
        return self.evaluator.evaluate(reference, candidate)

    def create_gradio_interface(self):
        return create_interface(
            self.evaluator,
            self.phrases,
            advance_delay=self.settings.advance_delay,
        )


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    app = PronunciationCheckerApp(settings=settings)
    interface = app.create_gradio_interface()
    interface.launch(
        server_name=settings.server_name,
        server_port=settings.server_port,
        share=settings.share,
    )


if __name__ == "__main__":
    main()


__all__ = ["PronunciationCheckerApp", "main"]
