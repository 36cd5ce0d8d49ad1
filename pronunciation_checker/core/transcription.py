"""Pluggable phonetic transcription applied before whole-phrase scoring."""

from __future__ import annotations

from typing import Callable

PhoneticTranscriber = Callable[[str], str]


def identity_transcription(text: str) -> str:
    """Default transcriber: the normalized text stands in for its pronunciation."""

    return text.lower()


__all__ = ["PhoneticTranscriber", "identity_transcription"]
