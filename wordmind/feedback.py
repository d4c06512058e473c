"""
Feedback scoring for Mastermind-for-words.

A guess is scored against a target with two numbers:
- a: total letters of the guess that appear in the target
- b: letters in exactly the right position

Both live in [0, L] with b <= a.
"""

from __future__ import annotations

from typing import NamedTuple


class InvalidInputError(ValueError):
    """Raised when `score` receives something other than two equal-length words."""


class Score(NamedTuple):
    a: int
    b: int


def score(target: str, guess: str) -> Score:
    """
    Score `guess` against `target`.

    Two-pass rule
    -------------
    1) EXACT PASS:
       - For each position where guess[i] == target[i], count it towards `b`
         and consume the letter on both sides.
    2) ELSEWHERE PASS:
       - For each unconsumed guess letter, consume the first unconsumed
         occurrence of it in the target, if any, and count it as an extra match.

    `a` is the exact count plus the extra matches. Words in this game never
    repeat letters, but repeated letters are still counted with multiplicity
    bounded by the target.

    Raises
    ------
    InvalidInputError
        If either argument is not a string, is empty, or the lengths differ.
    """
    if not isinstance(target, str) or not isinstance(guess, str):
        raise InvalidInputError("target and guess must be strings")
    if not target or not guess:
        raise InvalidInputError("target and guess must be non-empty")
    if len(target) != len(guess):
        raise InvalidInputError(
            f"target and guess must be the same length ({len(target)} != {len(guess)})"
        )

    remaining: list[str | None] = list(target)
    unmatched: list[str] = []

    # Pass 1: exact positions
    exact = 0
    for i, (t, g) in enumerate(zip(target, guess)):
        if t == g:
            exact += 1
            remaining[i] = None
        else:
            unmatched.append(g)

    # Pass 2: right letter, wrong place
    extra = 0
    for g in unmatched:
        try:
            idx = remaining.index(g)
        except ValueError:
            continue
        extra += 1
        remaining[idx] = None

    return Score(a=exact + extra, b=exact)


def validate_feasible_score(a: int, b: int, word_length: int) -> bool:
    """
    Return True iff (a, b) could be the score of some guess of `word_length` letters.

    Rejects negatives, non-integers, values above the word length, b > a, and
    a full positional match without a full letter match.
    """
    for value in (a, b):
        if isinstance(value, bool) or not isinstance(value, int):
            return False
    if a < 0 or b < 0:
        return False
    if a > word_length or b > word_length:
        return False
    if b > a:
        return False
    if b == word_length and a != word_length:
        return False
    return True
