"""
Word validity and word generation helpers.

Every guess in the game is a string of L distinct letters a-z.
"""

from __future__ import annotations

import random
import string
import time
from math import comb, perm
from typing import List, Optional, Set

ALPHABET = string.ascii_lowercase
VOWELS = "aeiou"


def is_valid_word(word: str, length: int) -> bool:
    """True iff `word` has exactly `length` distinct letters a-z (case-insensitive)."""
    if not isinstance(word, str) or not word or len(word) != length:
        return False
    w = word.lower()
    if any(ch not in ALPHABET for ch in w):
        return False
    return len(set(w)) == length


def count_permutations(n: int, k: int) -> int:
    """Number of ordered selections of k distinct items out of n, i.e. n!/(n-k)!."""
    if k < 0 or k > n:
        return 0
    return perm(n, k)


def generate_random_word(length: int, rng: Optional[random.Random] = None) -> str:
    """Return `length` distinct random letters."""
    if not isinstance(length, int) or length < 1 or length > len(ALPHABET):
        raise ValueError(f"invalid word length: {length!r} (must be 1-{len(ALPHABET)})")
    rng = rng or random.Random()
    letters = list(ALPHABET)
    rng.shuffle(letters)
    return "".join(letters[:length])


def _spread_words(length: int) -> List[str]:
    # One word per starting offset, letters spaced evenly over the alphabet.
    words: List[str] = []
    step = len(ALPHABET) // length
    if step < 1:
        return words
    for offset in range(length):
        used: Set[str] = set()
        word = ""
        for j in range(length):
            idx = (offset + j * step) % len(ALPHABET)
            while ALPHABET[idx] in used:
                idx = (idx + 1) % len(ALPHABET)
            word += ALPHABET[idx]
            used.add(ALPHABET[idx])
        words.append(word)
    return words


def _vowel_first_words(length: int, variants: int = 3) -> List[str]:
    consonants = [ch for ch in ALPHABET if ch not in VOWELS]
    words: List[str] = []
    for variant in range(variants):
        used: Set[str] = set()
        word = ""
        v_idx = variant % len(VOWELS)
        c_idx = variant % len(consonants)
        for j in range(length):
            if j < len(VOWELS) and VOWELS[v_idx] not in used:
                word += VOWELS[v_idx]
                used.add(VOWELS[v_idx])
                v_idx = (v_idx + 1) % len(VOWELS)
            else:
                while consonants[c_idx] in used:
                    c_idx = (c_idx + 1) % len(consonants)
                word += consonants[c_idx]
                used.add(consonants[c_idx])
                c_idx = (c_idx + 1) % len(consonants)
        if is_valid_word(word, length):
            words.append(word)
    return words


def generate_unique_letter_words(
    length: int,
    max_words: int = 5000,
    *,
    rng: Optional[random.Random] = None,
    timeout: float = 1.0,
) -> List[str]:
    """
    Build a shuffled list of distinct unique-letter words.

    The list starts from a few deterministic words (evenly spread letters and
    vowel-first mixes) and is topped up with random words until it holds
    min(max_words, C(26, length)) entries or `timeout` seconds have passed.
    The result is never empty.
    """
    if not isinstance(length, int) or length < 1 or length > 10:
        raise ValueError(f"invalid word length for generation: {length!r} (must be 1-10)")
    rng = rng or random.Random()

    target_count = min(max_words, comb(len(ALPHABET), length))
    result: Set[str] = set(_spread_words(length)) | set(_vowel_first_words(length))

    deadline = time.monotonic() + timeout
    while len(result) < target_count and time.monotonic() < deadline:
        result.add(generate_random_word(length, rng))

    if not result:
        result.add(generate_random_word(length, rng))

    words = sorted(result)
    rng.shuffle(words)
    return words
