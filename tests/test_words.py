import random

import pytest

from wordmind.words import (
    count_permutations,
    generate_random_word,
    generate_unique_letter_words,
    is_valid_word,
)


@pytest.mark.parametrize("word,length,expected", [
    ("crane", 5, True),
    ("CRANE", 5, True),
    ("hello", 5, False),   # repeated letter
    ("cran", 5, False),
    ("cranes", 5, False),
    ("cr4ne", 5, False),
    ("", 0, False),
    (None, 5, False),
    ("éclat", 5, False),
])
def test_is_valid_word(word, length, expected):
    assert is_valid_word(word, length) is expected


def test_count_permutations():
    assert count_permutations(26, 5) == 26 * 25 * 24 * 23 * 22
    assert count_permutations(4, 0) == 1
    assert count_permutations(3, 4) == 0


def test_generate_random_word_is_valid_and_seedable():
    for length in (1, 4, 8, 26):
        assert is_valid_word(generate_random_word(length), length)
    assert generate_random_word(6, random.Random(3)) == generate_random_word(6, random.Random(3))


@pytest.mark.parametrize("length", [0, 27, "5"])
def test_generate_random_word_rejects_length(length):
    with pytest.raises(ValueError):
        generate_random_word(length)


def test_generate_unique_letter_words():
    words = generate_unique_letter_words(5, max_words=200, rng=random.Random(0))
    assert len(words) == 200
    assert len(set(words)) == len(words)
    assert all(is_valid_word(w, 5) for w in words)


def test_generate_unique_letter_words_caps_at_combinations():
    # C(26, 1) == 26
    words = generate_unique_letter_words(1, max_words=1000, rng=random.Random(0))
    assert sorted(words) == [chr(c) for c in range(ord("a"), ord("z") + 1)]


def test_generate_unique_letter_words_is_never_empty():
    words = generate_unique_letter_words(4, max_words=10, rng=random.Random(0), timeout=0.0)
    assert words
    assert all(is_valid_word(w, 4) for w in words)


def test_generate_unique_letter_words_rejects_length():
    with pytest.raises(ValueError):
        generate_unique_letter_words(11)
