import logging

from pronunciation_checker.app import app as app_module
from pronunciation_checker.app.app import PronunciationCheckerApp
from pronunciation_checker.app.services.evaluation_service import PronunciationEvaluator
from pronunciation_checker.config import Settings


def test_app_wires_phrases_and_evaluator(caplog):
    caplog.set_level(logging.INFO, logger="pronunciation_checker")

    app = PronunciationCheckerApp(settings=Settings(advance_delay=0.0), phrases=["Hola", "Chau"])

    assert list(app.phrases) == ["Hola", "Chau"]
    assert isinstance(app.evaluator, PronunciationEvaluator)
    assert any("Application dependencies wired" in record.getMessage() for record in caplog.records)


def test_app_evaluate_delegates_to_evaluator():
    app = PronunciationCheckerApp(settings=Settings())

    result = app.evaluate("¿Me das un té con leche?", "me das un te con leche")

    assert result.percentage == 100
    assert result.worst_word is None


def test_app_injects_transcriber_into_supplied_evaluator():
    def merge_b_and_v(text):
        return text.replace("v", "b")

    evaluator = PronunciationEvaluator()
    app = PronunciationCheckerApp(
        settings=Settings(),
        evaluator=evaluator,
        transcriber=merge_b_and_v,
    )

    assert app.evaluator is evaluator
    assert app.evaluate("vaca", "baca").percentage == 100

    app.set_transcriber(None)
    assert app.evaluate("vaca", "baca").percentage == 75


def test_main_launches_interface_with_settings(monkeypatch):
    launched = {}

    class FakeInterface:
        def launch(self, **kwargs):
            launched.update(kwargs)

    monkeypatch.setattr(
        app_module,
        "load_settings",
        lambda: Settings(server_name="127.0.0.1", server_port=9000, share=True),
    )
    monkeypatch.setattr(app_module, "configure_logging", lambda level=None: None)
    monkeypatch.setattr(
        PronunciationCheckerApp,
        "create_gradio_interface",
        lambda self: FakeInterface(),
    )

    app_module.main()

    assert launched == {"server_name": "127.0.0.1", "server_port": 9000, "share": True}
