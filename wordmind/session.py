"""
session.py

One game of Mastermind-for-words from the host's point of view: the computer
guesses, the player scores, and scores can be corrected afterwards.

Corrections never rewind the engine in place. A fresh engine is built from the
state stored with the last kept guess, and the corrected guesses are replayed
into it.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from wordmind.constraints import ScoringError, find_scoring_errors
from wordmind.engine import GuessEngine, SearchProgress
from wordmind.feedback import score, validate_feasible_score
from wordmind.state import EngineSnapshot, GuessRecord
from wordmind.vocab import WordCorpus
from wordmind.words import is_valid_word

log = logging.getLogger(__name__)

MIN_WORD_LENGTH = 4
MAX_WORD_LENGTH = 8


@dataclass
class HistoryEntry:
    word: str
    a: int
    b: int
    engine_state: Optional[EngineSnapshot] = None

    @property
    def record(self) -> GuessRecord:
        return GuessRecord(self.word, self.a, self.b)


class GameSession:
    """
    Host-side game context owning one `GuessEngine`.

    API
    ---
    next_guess() -> Optional[str]
    submit_score(a, b, word=None) -> bool           (True when the game is won)
    update_score(index, a, b) -> None               (rollback + replay)
    validate_scores(chosen_word) -> list[ScoringError]
    fix_scoring_errors(chosen_word) -> list[HistoryEntry]
    """

    def __init__(
        self,
        word_length: int,
        corpus: Optional[WordCorpus] = None,
        *,
        rng_seed: Optional[int] = None,
        **engine_kwargs: Any,
    ) -> None:
        if not isinstance(word_length, int) or not MIN_WORD_LENGTH <= word_length <= MAX_WORD_LENGTH:
            raise ValueError(f"word_length must be {MIN_WORD_LENGTH}-{MAX_WORD_LENGTH}, got {word_length!r}")

        self.word_length = word_length
        self.corpus = corpus
        self.rng_seed = rng_seed
        self._engine_kwargs: Dict[str, Any] = dict(engine_kwargs)
        self._user_progress = self._engine_kwargs.pop("on_progress", None)

        self.progress: Optional[SearchProgress] = None
        self.pending_guess: Optional[str] = None
        self._history: List[HistoryEntry] = []
        self.engine = self._new_engine()

    def _new_engine(self) -> GuessEngine:
        rng = random.Random(self.rng_seed)
        return GuessEngine(
            self.word_length,
            self.corpus,
            rng=rng,
            on_progress=self._on_progress,
            **self._engine_kwargs,
        )

    def _on_progress(self, progress: SearchProgress) -> None:
        self.progress = progress
        if self._user_progress is not None:
            self._user_progress(progress)

    # -------------------------
    # Introspection helpers
    # -------------------------
    @property
    def history(self) -> List[HistoryEntry]:
        return list(self._history)

    @property
    def records(self) -> List[GuessRecord]:
        return [entry.record for entry in self._history]

    @property
    def is_won(self) -> bool:
        return bool(self._history) and self._history[-1].b == self.word_length

    # -------------------------
    # Game flow
    # -------------------------
    def next_guess(self) -> Optional[str]:
        if self.is_won:
            self.pending_guess = None
            return None
        self.pending_guess = self.engine.get_next_guess()
        return self.pending_guess

    def submit_score(self, a: int, b: int, word: Optional[str] = None) -> bool:
        """
        Record the score for `word` (defaults to the pending computer guess).

        Raises ValueError for a missing or malformed word and for a score no
        word could produce. Returns True when the score completes the game.
        """
        word = (word or self.pending_guess or "").lower()
        if not is_valid_word(word, self.word_length):
            raise ValueError(f"not a valid {self.word_length}-letter guess: {word!r}")
        if not validate_feasible_score(a, b, self.word_length):
            raise ValueError(f"impossible score {a}+{b} for {self.word_length}-letter words")

        last = self._history[-1] if self._history else None
        if last is not None and (last.word, last.a, last.b) == (word, a, b):
            log.debug("Ignoring duplicate score entry for %r", word)
            return self.is_won

        self.engine.process_feedback(word, a, b)
        self._history.append(HistoryEntry(word, a, b, self.engine.get_state()))
        self.pending_guess = None
        return self.is_won

    def update_score(self, index: int, a: int, b: int) -> None:
        """Correct the score of guess `index` (0-based) and drop every later guess."""
        if index < 0 or index >= len(self._history):
            raise IndexError(f"invalid guess index {index}; history length is {len(self._history)}")
        if not validate_feasible_score(a, b, self.word_length):
            raise ValueError(f"impossible score {a}+{b} for {self.word_length}-letter words")

        corrected = HistoryEntry(self._history[index].word, a, b)
        self._rebuild(self._history[:index], [corrected])

    def _rebuild(self, kept: List[HistoryEntry], replay: List[HistoryEntry]) -> None:
        """
        Start a fresh engine holding `kept` followed by `replay`.

        The engine state stored on the last kept entry is restored directly;
        without one the kept entries are replayed too.
        """
        self.engine = self._new_engine()
        self.progress = None
        self.pending_guess = None
        if kept and kept[-1].engine_state is not None:
            self.engine.set_state(kept[-1].engine_state)
            self._history = list(kept)
        else:
            replay = list(kept) + list(replay)
            self._history = []
        log.info("Replaying %d guess(es) into a fresh engine", len(replay))
        for entry in replay:
            self.engine.process_feedback(entry.word, entry.a, entry.b)
            self._history.append(HistoryEntry(entry.word, entry.a, entry.b, self.engine.get_state()))

    # -------------------------
    # Score validation
    # -------------------------
    def validate_scores(self, chosen_word: str) -> List[ScoringError]:
        return find_scoring_errors(chosen_word.lower(), self.records)

    def fix_scoring_errors(self, chosen_word: str) -> List[HistoryEntry]:
        """
        Re-score every guess from the first error onwards against `chosen_word`.

        Guesses after a corrected win are discarded. Returns the entries that
        changed.
        """
        chosen_word = chosen_word.lower()
        if not is_valid_word(chosen_word, self.word_length):
            raise ValueError(f"not a valid {self.word_length}-letter word: {chosen_word!r}")
        errors = self.validate_scores(chosen_word)
        if not errors:
            return []

        first = min(error.guess_number for error in errors) - 1
        entries: List[HistoryEntry] = []
        changed: List[HistoryEntry] = []
        for entry in self._history[first:]:
            actual = score(chosen_word, entry.word)
            fixed = HistoryEntry(entry.word, actual.a, actual.b)
            if (actual.a, actual.b) != (entry.a, entry.b):
                changed.append(fixed)
            entries.append(fixed)
            if actual.b == self.word_length:
                break

        self._rebuild(self._history[:first], entries)
        return changed
