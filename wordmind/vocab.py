from __future__ import annotations

import json
import logging
from typing import Dict, List, Mapping, Sequence

import pandas as pd

from wordmind.words import is_valid_word

log = logging.getLogger(__name__)

DEFAULT_SET_NAME = "default"


def _category_length(category: str) -> int | None:
    # "5-letter" -> 5
    head = category.split("-", 1)[0]
    return int(head) if head.isdigit() else None


def clean_words(words: Sequence[object], length: int) -> List[str]:
    """Lowercase, keep valid `length`-letter unique-letter words, drop repeats (first occurrence wins)."""
    clean: List[str] = []
    seen = set()
    for val in words:
        if not isinstance(val, str):
            continue
        w = val.strip().lower()
        if not is_valid_word(w, length) or w in seen:
            continue
        seen.add(w)
        clean.append(w)
    return clean


class WordCorpus:
    """
    Named word lists grouped by word length.

    `sets` maps a word length to {list name: words}. Every stored list is
    cleaned with `clean_words`; lists that end up empty are dropped.
    """

    def __init__(self, sets: Mapping[int, Mapping[str, Sequence[str]]]) -> None:
        if not isinstance(sets, Mapping):
            raise TypeError("`sets` must map word length -> {name: words}")

        self._sets: Dict[int, Dict[str, List[str]]] = {}
        dropped = 0
        for length, named in sets.items():
            if not isinstance(length, int) or length < 1:
                raise ValueError(f"word length keys must be positive integers, got {length!r}")
            kept: Dict[str, List[str]] = {}
            for name, words in named.items():
                words = list(words)
                clean = clean_words(words, length)
                dropped += len(words) - len(clean)
                if clean:
                    kept[str(name)] = clean
            if kept:
                self._sets[length] = kept
        if dropped:
            log.info("Dropped %d invalid or duplicate words from corpus", dropped)

    # ---------- Construction helpers ----------

    @classmethod
    def from_words(cls, words: Sequence[str], name: str = DEFAULT_SET_NAME) -> "WordCorpus":
        """Group a flat word list by length into one list per length."""
        by_length: Dict[int, Dict[str, List[str]]] = {}
        for w in words:
            if isinstance(w, str) and w:
                by_length.setdefault(len(w.strip()), {}).setdefault(name, []).append(w)
        return cls(by_length)

    @classmethod
    def from_csv(cls, path: str, column: str = "word", set_column: str = "set") -> "WordCorpus":
        """
        Load a corpus from a CSV.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        set_column : str
            Optional column naming the list each word belongs to; words without
            one go to the "default" list.

        Raises
        ------
        FileNotFoundError, KeyError
        """
        df = pd.read_csv(path)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")

        df = df.dropna(subset=[column])
        words = df[column].astype(str).str.strip()
        if set_column in df.columns:
            names = df[set_column].fillna(DEFAULT_SET_NAME).astype(str)
        else:
            names = pd.Series(DEFAULT_SET_NAME, index=df.index)

        by_length: Dict[int, Dict[str, List[str]]] = {}
        for w, name in zip(words, names):
            if w:
                by_length.setdefault(len(w), {}).setdefault(name, []).append(w)
        return cls(by_length)

    @classmethod
    def from_dictionary_data(cls, data: Mapping[str, object]) -> "WordCorpus":
        """
        Build a corpus from dictionary JSON data:
        {"wordSets": {"5-letter": [{"name": ..., "set": [{"word": ...}, ...]}, ...]}}
        """
        word_sets = data.get("wordSets") if isinstance(data, Mapping) else None
        if not isinstance(word_sets, Mapping):
            log.warning("Dictionary data has no 'wordSets' mapping; corpus is empty")
            return cls({})

        by_length: Dict[int, Dict[str, List[str]]] = {}
        for category, sets in word_sets.items():
            length = _category_length(str(category))
            if length is None or not isinstance(sets, list):
                continue
            for i, word_set in enumerate(sets):
                if not isinstance(word_set, Mapping) or not isinstance(word_set.get("set"), list):
                    continue
                name = str(word_set.get("name") or f"set-{i}")
                words = [
                    entry.get("word") if isinstance(entry, Mapping) else entry
                    for entry in word_set["set"]
                ]
                by_length.setdefault(length, {})[name] = words
        return cls(by_length)

    @classmethod
    def from_json(cls, path: str) -> "WordCorpus":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dictionary_data(json.load(f))

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Total number of words across all lists."""
        return sum(len(words) for named in self._sets.values() for words in named.values())

    def lengths(self) -> List[int]:
        return sorted(self._sets)

    def lists_for(self, length: int) -> Dict[str, List[str]]:
        """Return copies of the named lists for `length` (empty dict if none)."""
        return {name: list(words) for name, words in self._sets.get(length, {}).items()}

    def words_for(self, length: int) -> List[str]:
        """All distinct words of `length` across lists, in list order."""
        merged: List[str] = []
        seen = set()
        for words in self._sets.get(length, {}).values():
            for w in words:
                if w not in seen:
                    seen.add(w)
                    merged.append(w)
        return merged
