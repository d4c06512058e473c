from __future__ import annotations

import logging
import random
from typing import Collection, List, Optional

from wordmind.vocab import WordCorpus
from wordmind.words import is_valid_word

log = logging.getLogger(__name__)


class DictionaryCursor:
    """
    Seed guesses drawn from one randomly chosen corpus list.

    The list is picked and shuffled once, at construction, with the given RNG.
    The cursor only moves forward.
    """

    def __init__(self, corpus: Optional[WordCorpus], word_length: int, rng: Optional[random.Random] = None) -> None:
        if corpus is not None and not isinstance(corpus, WordCorpus):
            raise TypeError("corpus must be a WordCorpus or None")

        self._rng = rng or random.Random()
        self.word_length = word_length
        self.set_name: Optional[str] = None
        self._words: List[str] = []
        self._index = 0

        lists = corpus.lists_for(word_length) if corpus is not None else {}
        if not lists:
            log.info("No %d-letter word lists available; dictionary guesses disabled", word_length)
            return

        names = sorted(lists)
        self.set_name = names[self._rng.randrange(len(names))]
        words = [w.lower() for w in lists[self.set_name]]
        self._rng.shuffle(words)
        self._words = words

    def __len__(self) -> int:
        return len(self._words)

    @property
    def position(self) -> int:
        return self._index

    def seek(self, position: int) -> None:
        """Move the cursor to `position` (clamped to the list bounds)."""
        self._index = max(0, min(int(position), len(self._words)))

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._words)

    def next_word(self, used: Collection[str]) -> Optional[str]:
        """Next valid word not in `used`, or None once the list runs out."""
        while self._index < len(self._words):
            word = self._words[self._index]
            self._index += 1
            if is_valid_word(word, self.word_length) and word not in used:
                return word
        return None
