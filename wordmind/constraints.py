"""
constraints.py

Checks candidate words against recorded feedback and audits recorded
feedback against a known target.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from wordmind.feedback import InvalidInputError, Score, score
from wordmind.state import GuessRecord


@dataclass(frozen=True)
class ScoringError:
    guess_number: int  # 1-based
    guess: str
    reported: Score
    actual: Optional[Score]


def is_consistent(candidate: str, history: Iterable[GuessRecord]) -> bool:
    """True iff scoring every past guess against `candidate` reproduces its recorded score."""
    for record in history:
        result = score(candidate, record.word)
        if result.a != record.a or result.b != record.b:
            return False
    return True


def filter_candidates(words: Iterable[str], history: Sequence[GuessRecord]) -> List[str]:
    """
    Keep only candidates that match *all* records in history.
    Uses `score` for correctness.
    """
    return [w for w in words if is_consistent(w, history)]


def find_scoring_errors(chosen_word: str, history: Sequence[GuessRecord]) -> List[ScoringError]:
    """
    Compare every recorded score with the true score against `chosen_word`.

    A record that cannot be scored against the chosen word at all (e.g. a
    different length) is reported with `actual=None`.
    """
    errors: List[ScoringError] = []
    for number, record in enumerate(history, start=1):
        try:
            actual = score(chosen_word, record.word)
        except InvalidInputError:
            errors.append(ScoringError(number, record.word, record.score, None))
            continue
        if actual != record.score:
            errors.append(ScoringError(number, record.word, record.score, actual))
    return errors
