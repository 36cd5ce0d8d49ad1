import itertools

import pytest

from pronunciation_checker.core.edit_distance import edit_distance

SAMPLES = ["", "a", "cafe", "cafes", "cortado", "latte", "leche", "te con leche"]


@pytest.mark.parametrize(
    ("source", "target", "expected"),
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("traes", "traigo", 3),
        ("cafe", "cafe", 0),
        ("", "leche", 5),
        ("leche", "", 5),
        ("", "", 0),
    ],
)
def test_edit_distance_known_values(source, target, expected):
    assert edit_distance(source, target) == expected


def test_edit_distance_is_case_sensitive():
    assert edit_distance("Cafe", "cafe") == 1


def test_edit_distance_identity_and_symmetry():
    for sample in SAMPLES:
        assert edit_distance(sample, sample) == 0
    for first, second in itertools.combinations(SAMPLES, 2):
        assert edit_distance(first, second) == edit_distance(second, first)


def test_edit_distance_triangle_inequality():
    for a, b, c in itertools.permutations(SAMPLES, 3):
        assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


def test_edit_distance_accepts_word_sequences():
    assert edit_distance(["me", "das", "un", "te"], ["me", "da", "un", "te"]) == 1
