"""
engine.py

The computer player: produces the next guess that is consistent with every
score recorded so far.

Tiers, tried in order on each request
-------------------------------------
- Endgame solver: the last score had exactly one letter out of place, so
  only single-letter substitutions of the last guess are examined.
- Dictionary seeding: the first few guesses come from a shuffled word list.
- Monotonic search: walk every k-permutation of the alphabet in canonical
  order and return the first unused word consistent with history. The walk
  position survives across calls until new feedback arrives.

`get_next_guess` returns None when the game is already won or when no word
can satisfy the recorded feedback.
"""

from __future__ import annotations

import copy
import logging
import random
from typing import Callable, List, NamedTuple, Optional, Sequence, Set

from wordmind.constraints import is_consistent
from wordmind.permutations import PermutationGenerator
from wordmind.sampler import DictionaryCursor
from wordmind.state import EngineSnapshot, GuessRecord, SearchState
from wordmind.vocab import WordCorpus
from wordmind.words import ALPHABET, is_valid_word

log = logging.getLogger(__name__)

DICTIONARY_PHASE = 4
REPORT_INTERVAL = 100
NO_MATCHES_LEFT = "NO MATCHES LEFT"


class SearchProgress(NamedTuple):
    current_word: str
    checked_count: int
    is_searching: bool


ProgressCallback = Callable[[SearchProgress], None]


class GuessEngine:
    """
    Guess engine for one game.

    API
    ---
    get_next_guess() -> Optional[str]
        Next guess, or None (won / feedback unsatisfiable).
    process_feedback(guess, a, b) -> None
        Record a score. Resets any in-flight exhaustive search.
    get_state() / set_state(snapshot)
        Copy the engine state out / in.

    The engine is not reentrant; callers serialize access to one instance.
    """

    def __init__(
        self,
        word_length: int,
        corpus: Optional[WordCorpus] = None,
        *,
        dictionary_phase: int = DICTIONARY_PHASE,
        report_interval: int = REPORT_INTERVAL,
        rng: Optional[random.Random] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        if not isinstance(word_length, int) or word_length < 1 or word_length > len(ALPHABET):
            raise ValueError(f"word_length must be 1-{len(ALPHABET)}, got {word_length!r}")
        if dictionary_phase < 0:
            raise ValueError("dictionary_phase must not be negative")
        if report_interval < 1:
            raise ValueError("report_interval must be positive")

        self.word_length = word_length
        self.corpus = corpus
        self.dictionary_phase = int(dictionary_phase)
        self.report_interval = int(report_interval)
        self.on_progress = on_progress

        self._used_words: Set[str] = set()
        self._history: List[GuessRecord] = []
        self._search: Optional[SearchState] = None
        self._generator: Optional[PermutationGenerator] = None
        self._dictionary = DictionaryCursor(corpus, word_length, rng)

    # -------------------------
    # State management
    # -------------------------
    @property
    def history(self) -> List[GuessRecord]:
        return list(self._history)

    @property
    def used_words(self) -> Set[str]:
        return set(self._used_words)

    @property
    def search_state(self) -> Optional[SearchState]:
        return self._search

    def get_state(self) -> EngineSnapshot:
        return EngineSnapshot(
            used_words=sorted(self._used_words),
            guess_history=list(self._history),
            generator_state=self._search,
            dictionary_index=self._dictionary.position,
        )

    def set_state(self, snapshot: Optional[EngineSnapshot]) -> None:
        if snapshot is None:
            return
        snapshot = copy.deepcopy(snapshot)
        self._used_words = set(snapshot.used_words)
        self._history = list(snapshot.guess_history)
        self._search = snapshot.generator_state
        self._generator = (
            PermutationGenerator(state=self._search.permutation) if self._search is not None else None
        )
        self._dictionary.seek(snapshot.dictionary_index)

    # -------------------------
    # Core API
    # -------------------------
    def process_feedback(self, guess: str, a: int, b: int) -> None:
        self._used_words.add(guess)
        self._history.append(GuessRecord(word=guess, a=a, b=b))
        # New feedback invalidates the in-flight search position.
        self._search = None
        self._generator = None

    def discard(self, word: str) -> None:
        """Never offer `word` as a guess."""
        self._used_words.add(word)

    def get_next_guess(self) -> Optional[str]:
        last = self._history[-1] if self._history else None
        if last is not None and last.b == self.word_length:
            return None

        if last is not None and last.b == self.word_length - 1:
            log.info("One letter out of place after %r; engaging endgame solver", last.word)
            return self._endgame_guess(last)

        if len(self._history) < self.dictionary_phase:
            word = self._dictionary.next_word(self._used_words)
            if word is not None:
                log.debug("Dictionary guess %r (list %r)", word, self._dictionary.set_name)
                return word

        return self._monotonic_guess()

    # -------------------------
    # Tiers
    # -------------------------
    def _endgame_guess(self, last: GuessRecord) -> Optional[str]:
        known = set(last.word)
        replacements = [ch for ch in ALPHABET if ch not in known]
        candidates: List[str] = []

        for i in range(self.word_length):
            for ch in replacements:
                word = last.word[:i] + ch + last.word[i + 1:]
                if (
                    is_valid_word(word, self.word_length)
                    and word not in self._used_words
                    and is_consistent(word, self._history)
                ):
                    candidates.append(word)

        if not candidates:
            log.warning("Endgame solver found no candidates; reverting to monotonic search")
            return self._monotonic_guess()
        if len(candidates) == 1:
            log.info("Endgame solver pinpointed %r", candidates[0])
            return candidates[0]

        log.info("Endgame solver found %d possibilities; crafting differentiating guess", len(candidates))
        return self._differentiating_guess(candidates, known)

    def _differentiating_guess(self, candidates: Sequence[str], known: Set[str]) -> str:
        letters: List[str] = []
        for word in candidates:
            for ch in word:
                if ch not in known and ch not in letters:
                    letters.append(ch)

        guess = "".join(letters[: self.word_length])
        for ch in ALPHABET:
            if len(guess) >= self.word_length:
                break
            if ch not in guess:
                guess += ch
        guess = guess[: self.word_length]

        if is_valid_word(guess, self.word_length) and guess not in self._used_words:
            return guess
        return candidates[0]

    def _monotonic_guess(self) -> Optional[str]:
        if self._search is None or self._generator is None:
            log.info("Engaging full-alphabet monotonic search")
            self._generator = PermutationGenerator(self.word_length)
            self._search = SearchState(self._generator.state, 0)

        generator = self._generator
        checked = self._search.checked_count
        session_checked = 0
        try:
            while True:
                word = generator.next_candidate()
                if word is None:
                    log.info("Monotonic search exhausted after %d candidates", checked)
                    self._report(NO_MATCHES_LEFT, checked, False)
                    return None

                checked += 1
                if checked == 1 or session_checked % self.report_interval == 0:
                    self._report(word, checked, True)
                session_checked += 1

                if word not in self._used_words and is_consistent(word, self._history):
                    self._report(word, checked, False)
                    return word
        finally:
            self._search = SearchState(generator.state, checked)

    def _report(self, word: str, checked: int, searching: bool) -> None:
        if self.on_progress is not None:
            self.on_progress(SearchProgress(word, checked, searching))
