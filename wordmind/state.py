from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from wordmind.feedback import Score
from wordmind.permutations import PermutationState


@dataclass(frozen=True)
class GuessRecord:
    word: str
    a: int
    b: int

    @property
    def score(self) -> Score:
        return Score(a=self.a, b=self.b)

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "scores": {"a": self.a, "b": self.b}}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GuessRecord":
        scores = data["scores"]
        return cls(word=str(data["word"]), a=int(scores["a"]), b=int(scores["b"]))


@dataclass(frozen=True)
class SearchState:
    """Position of an in-flight exhaustive search."""

    permutation: PermutationState
    checked_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"permutation": self.permutation.to_dict(), "checkedCount": self.checked_count}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchState":
        return cls(
            permutation=PermutationState.from_dict(data["permutation"]),
            checked_count=int(data.get("checkedCount", 0)),
        )


@dataclass
class EngineSnapshot:
    """
    Everything a `GuessEngine` needs to resume: words already offered, the
    feedback history, the exhaustive-search position (None when idle) and how
    far the dictionary list has been read.

    `to_dict`/`from_dict` convert to and from plain JSON-compatible data.
    """

    used_words: List[str] = field(default_factory=list)
    guess_history: List[GuessRecord] = field(default_factory=list)
    generator_state: Optional[SearchState] = None
    dictionary_index: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "usedWords": list(self.used_words),
            "guessHistory": [record.to_dict() for record in self.guess_history],
            "generatorState": self.generator_state.to_dict() if self.generator_state else None,
            "dictionaryIndex": self.dictionary_index,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineSnapshot":
        generator_state = data.get("generatorState")
        return cls(
            used_words=[str(w) for w in data.get("usedWords") or []],
            guess_history=[GuessRecord.from_dict(r) for r in data.get("guessHistory") or []],
            generator_state=SearchState.from_dict(generator_state) if generator_state else None,
            dictionary_index=int(data.get("dictionaryIndex") or 0),
        )
