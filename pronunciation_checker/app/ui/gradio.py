"""User interface assembly for the Gradio front-end."""

from __future__ import annotations

import time
from typing import Callable, Iterator, Optional, Tuple

import gradio as gr

from ..data.phrases import COMPLETION_MESSAGE, PhraseSequence
from ..services.evaluation_service import PronunciationEvaluator
from ...utils.observability import get_logger

_logger = get_logger(__name__).bind(component="gradio_ui")

EMPTY_ATTEMPT_MESSAGE = "Escribí o dictá la frase antes de evaluar."
DEFAULT_FEEDBACK_MESSAGE = "Leé la frase en voz alta y pegá la transcripción para evaluarla."

UiUpdate = Tuple[str, str, Optional[int]]


def render_phrase(sequence: PhraseSequence, index: Optional[int]) -> str:
    """Return the markdown shown in the target-phrase panel."""

    if index is None:
        return f"### {COMPLETION_MESSAGE}"
    return f"### {sequence.phrase_at(index)}\n\nFrase {index + 1} de {len(sequence)}"


def advance(sequence: PhraseSequence, index: Optional[int]) -> Tuple[str, Optional[int]]:
    """Move the caller's cursor one phrase forward."""

    next_index = None if index is None else sequence.next_index(index)
    if next_index is None:
        _logger.info("Phrase list completed", context={"phrases": len(sequence)})
    else:
        _logger.info(
            "Showing next phrase",
            context={"index": next_index, "phrase": sequence.phrase_at(next_index)},
        )
    return render_phrase(sequence, next_index), next_index


def evaluate_attempt(
    evaluator: PronunciationEvaluator,
    sequence: PhraseSequence,
    index: Optional[int],
    spoken: Optional[str],
    *,
    advance_delay: float = 0.0,
    sleep: Callable[[float], None] = time.sleep,
) -> Iterator[UiUpdate]:
    """Score ``spoken`` against the current phrase, then move to the next one.

    Yields ``(feedback, phrase_markdown, index)`` tuples: first the feedback with
    the phrase still visible, then, after ``advance_delay`` seconds, the same
    feedback alongside the next phrase.
    """

    if index is None:
        yield COMPLETION_MESSAGE, render_phrase(sequence, None), None
        return

    if not spoken or not spoken.strip():
        yield EMPTY_ATTEMPT_MESSAGE, render_phrase(sequence, index), index
        return

    try:
        result = evaluator.evaluate(sequence.phrase_at(index), spoken)
    except Exception as exc:  # pragma: no cover - surface UI level failures
        yield f"No se pudo evaluar la frase: {exc}", render_phrase(sequence, index), index
        return

    feedback = result.rendered_report
    yield feedback, render_phrase(sequence, index), index

    if advance_delay > 0:
        sleep(advance_delay)
    phrase_markdown, next_index = advance(sequence, index)
    yield feedback, phrase_markdown, next_index


def create_interface(
    evaluator: PronunciationEvaluator,
    sequence: PhraseSequence,
    *,
    advance_delay: float = 0.0,
) -> gr.Blocks:
    """Construct the interactive Gradio Blocks UI."""

    def _evaluate(spoken: str, index: Optional[int]):
        yield from evaluate_attempt(
            evaluator,
            sequence,
            index,
            spoken,
            advance_delay=advance_delay,
        )

    def _skip(index: Optional[int]):
        phrase_markdown, next_index = advance(sequence, index)
        return phrase_markdown, next_index

    interface_css = """
    .pc-container {max-width: 860px; margin: 0 auto; gap: 24px;}
    .pc-hero {text-align: center; padding-bottom: 16px;}
    .pc-panel {border: 1px solid rgba(15, 23, 42, 0.08); border-radius: 16px; background: #ffffff; padding: 24px;}
    .pc-phrase h3 {margin: 0; font-size: 1.6rem;}
    .pc-button {width: 100%; font-weight: 600;}
    .pc-tip {color: #4b5563; font-size: 0.92rem; margin-top: 8px;}
    """

    with gr.Blocks(
        title="Pronunciation Checker",
        theme=gr.themes.Soft(),
        css=interface_css,
    ) as interface:
        phrase_index = gr.State(0)

        with gr.Column(elem_classes=["pc-container"]):
            gr.Markdown(
                "<h2>Pronunciation Checker</h2>\n"
                "<p>Decí la frase en voz alta y compará lo que entendió el reconocedor de voz.</p>",
                elem_classes=["pc-hero"],
            )

            with gr.Group(elem_classes=["pc-panel"]):
                phrase_md = gr.Markdown(
                    value=render_phrase(sequence, 0),
                    elem_classes=["pc-phrase"],
                )
                spoken_input = gr.Textbox(
                    label="Frase dicha",
                    placeholder="Transcripción de lo que dijiste",
                    lines=1,
                )
                with gr.Row():
                    evaluate_btn = gr.Button(
                        "Evaluar",
                        variant="primary",
                        elem_classes=["pc-button"],
                    )
                    skip_btn = gr.Button("Siguiente frase", elem_classes=["pc-button"])
                gr.Markdown(
                    "La puntuación compara ambas frases sin tildes ni signos de puntuación.",
                    elem_classes=["pc-tip"],
                )

            with gr.Group(elem_classes=["pc-panel"]):
                feedback_box = gr.Textbox(
                    label="Resultado",
                    value=DEFAULT_FEEDBACK_MESSAGE,
                    lines=6,
                    interactive=False,
                )

        evaluate_btn.click(
            fn=_evaluate,
            inputs=[spoken_input, phrase_index],
            outputs=[feedback_box, phrase_md, phrase_index],
        )
        spoken_input.submit(
            fn=_evaluate,
            inputs=[spoken_input, phrase_index],
            outputs=[feedback_box, phrase_md, phrase_index],
        )
        skip_btn.click(
            fn=_skip,
            inputs=[phrase_index],
            outputs=[phrase_md, phrase_index],
        )

    return interface


__all__ = [
    "EMPTY_ATTEMPT_MESSAGE",
    "advance",
    "create_interface",
    "evaluate_attempt",
    "render_phrase",
]
