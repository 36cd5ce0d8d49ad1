"""Practice phrases and the caller-held cursor used to walk through them."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

COMPLETION_MESSAGE = "¡Has completado todas las frases!"

DEFAULT_PHRASES: Tuple[str, ...] = (
    "¿Me traés un café con leche, por favor?",
    "Quisiera un cortado, ¿tenés?",
    "¿Me podés poner un café solo, por favor?",
    "Quiero un latte grande, ¿está bien?",
    "¿Me das un té con leche?",
    "Voy a pedir un café helado, ¿me lo podés traer?",
    "¿Me traés una medialuna con un café?",
    "Quiero un capuchino, por favor.",
    "¿Podés traerme un jugo de naranja natural?",
    "Te pido un chocolate caliente con churros.",
)


class PhraseSequence:
    """Immutable ordered list of target phrases.

    The sequence never tracks which phrase is active; callers keep the index
    and ask for the next one, so the same sequence can back many sessions.
    """

    def __init__(self, phrases: Optional[Iterable[str]] = None) -> None:
        source = DEFAULT_PHRASES if phrases is None else phrases
        cleaned = tuple(str(phrase).strip() for phrase in source if phrase and str(phrase).strip())
        if not cleaned:
            raise ValueError("PhraseSequence requires at least one phrase")
        self._phrases: Tuple[str, ...] = cleaned

    def __len__(self) -> int:
        return len(self._phrases)

    def __iter__(self) -> Iterator[str]:
        return iter(self._phrases)

    def __getitem__(self, index: int) -> str:
        return self._phrases[index]

    def _check_index(self, index: int) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"phrase index must be an int, got {type(index).__name__}")
        if not 0 <= index < len(self._phrases):
            raise IndexError(f"phrase index {index} out of range 0..{len(self._phrases) - 1}")
        return index

    def phrase_at(self, index: int) -> str:
        return self._phrases[self._check_index(index)]

    def is_last(self, index: int) -> bool:
        return self._check_index(index) == len(self._phrases) - 1

    def next_index(self, index: int) -> Optional[int]:
        """Return the index after ``index``, or ``None`` once the list is done."""

        if self.is_last(index):
            return None
        return index + 1


__all__ = ["COMPLETION_MESSAGE", "DEFAULT_PHRASES", "PhraseSequence"]
