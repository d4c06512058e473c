"""
permutations.py

Resumable enumeration of every k-permutation of an alphabet.

The traversal is a Heap-style cyclic scheme: an ordering of all n alphabet
indices plus a countdown per selected slot. The first k indices of the
ordering are the current candidate. The order is the same canonical order as
`itertools.permutations(alphabet, k)`.

The state is a plain value so it can be stored in an engine snapshot and
resumed later; `advance` is the pure step, `PermutationGenerator` is the
in-place iterator used in the search loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from wordmind.words import ALPHABET


@dataclass(frozen=True)
class PermutationState:
    alphabet: str
    k: int
    indices: Tuple[int, ...]
    cycles: Tuple[int, ...]
    started: bool = False
    exhausted: bool = False

    @classmethod
    def initial(cls, k: int, alphabet: str = ALPHABET) -> "PermutationState":
        if not isinstance(k, int) or k < 0:
            raise ValueError(f"k must be a non-negative integer, got {k!r}")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("alphabet must not repeat symbols")
        n = len(alphabet)
        return cls(
            alphabet=alphabet,
            k=k,
            indices=tuple(range(n)),
            cycles=tuple(n - i for i in range(min(k, n))),
            exhausted=k > n,
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "alphabet": self.alphabet,
            "k": self.k,
            "indices": list(self.indices),
            "cycles": list(self.cycles),
            "started": self.started,
            "exhausted": self.exhausted,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "PermutationState":
        return cls(
            alphabet=str(data["alphabet"]),
            k=int(data["k"]),
            indices=tuple(int(i) for i in data["indices"]),
            cycles=tuple(int(c) for c in data["cycles"]),
            started=bool(data.get("started", False)),
            exhausted=bool(data.get("exhausted", False)),
        )


def _step(indices: List[int], cycles: List[int], n: int, k: int) -> bool:
    """Move `indices`/`cycles` to the next permutation in place. False when exhausted."""
    for i in range(k - 1, -1, -1):
        cycles[i] -= 1
        if cycles[i] == 0:
            # rotate indices[i:] left by one
            indices[i:] = indices[i + 1:] + indices[i:i + 1]
            cycles[i] = n - i
        else:
            j = cycles[i]
            indices[i], indices[n - j] = indices[n - j], indices[i]
            return True
    return False


def _word(alphabet: str, indices: List[int] | Tuple[int, ...], k: int) -> str:
    return "".join(alphabet[i] for i in indices[:k])


def advance(state: PermutationState) -> Tuple[Optional[str], PermutationState]:
    """
    Return (next candidate, new state), or (None, exhausted state) when done.

    The input state is never modified.
    """
    if state.exhausted:
        return None, state
    if not state.started:
        return _word(state.alphabet, state.indices, state.k), PermutationState(
            alphabet=state.alphabet,
            k=state.k,
            indices=state.indices,
            cycles=state.cycles,
            started=True,
        )

    indices = list(state.indices)
    cycles = list(state.cycles)
    n = len(state.alphabet)
    if not _step(indices, cycles, n, state.k):
        return None, PermutationState(
            alphabet=state.alphabet,
            k=state.k,
            indices=tuple(indices),
            cycles=tuple(cycles),
            started=True,
            exhausted=True,
        )
    return _word(state.alphabet, indices, state.k), PermutationState(
        alphabet=state.alphabet,
        k=state.k,
        indices=tuple(indices),
        cycles=tuple(cycles),
        started=True,
    )


class PermutationGenerator:
    """
    Iterator over k-permutations that can be paused and resumed.

    `next_candidate()` returns the next word or None once the traversal is
    exhausted; an exhausted generator stays exhausted. `state` captures the
    position, and `PermutationGenerator(state=...)` continues from it.
    """

    def __init__(self, k: int = 0, alphabet: str = ALPHABET, *, state: Optional[PermutationState] = None) -> None:
        if state is None:
            state = PermutationState.initial(k, alphabet)
        self._alphabet = state.alphabet
        self._k = state.k
        self._n = len(state.alphabet)
        self._indices = list(state.indices)
        self._cycles = list(state.cycles)
        self._started = state.started
        self._exhausted = state.exhausted

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def state(self) -> PermutationState:
        return PermutationState(
            alphabet=self._alphabet,
            k=self._k,
            indices=tuple(self._indices),
            cycles=tuple(self._cycles),
            started=self._started,
            exhausted=self._exhausted,
        )

    def next_candidate(self) -> Optional[str]:
        if self._exhausted:
            return None
        if not self._started:
            self._started = True
            return _word(self._alphabet, self._indices, self._k)
        if not _step(self._indices, self._cycles, self._n, self._k):
            self._exhausted = True
            return None
        return _word(self._alphabet, self._indices, self._k)

    def __iter__(self) -> "PermutationGenerator":
        return self

    def __next__(self) -> str:
        word = self.next_candidate()
        if word is None:
            raise StopIteration
        return word
