import itertools

from wordmind.permutations import PermutationGenerator, PermutationState, advance
from wordmind.words import count_permutations


def _drain(gen):
    return list(gen)


def test_matches_canonical_order():
    alphabet = "abcde"
    expected = ["".join(p) for p in itertools.permutations(alphabet, 3)]
    assert _drain(PermutationGenerator(3, alphabet)) == expected


def test_full_alphabet_pairs_are_distinct_and_complete():
    words = _drain(PermutationGenerator(2))
    assert len(words) == count_permutations(26, 2) == 650
    assert len(set(words)) == len(words)
    assert words[0] == "ab"
    assert words[-1] == "zy"


def test_exhausted_generator_stays_exhausted():
    gen = PermutationGenerator(2, "abc")
    assert len(_drain(gen)) == 6
    assert gen.exhausted
    assert gen.next_candidate() is None
    assert gen.next_candidate() is None


def test_k_larger_than_alphabet_yields_nothing():
    gen = PermutationGenerator(4, "abc")
    assert gen.next_candidate() is None
    assert gen.exhausted


def test_advance_is_pure():
    state = PermutationState.initial(2, "abcd")
    first, state1 = advance(state)
    again, _ = advance(state)
    assert first == again == "ab"
    second, state2 = advance(state1)
    assert second == "ac"
    assert state1.indices == (0, 1, 2, 3)
    assert not state.started


def test_advance_walks_the_same_sequence_as_the_generator():
    state = PermutationState.initial(3, "abcdef")
    words = []
    while True:
        word, state = advance(state)
        if word is None:
            break
        words.append(word)
    assert state.exhausted
    assert words == _drain(PermutationGenerator(3, "abcdef"))


def test_resume_from_serialized_state():
    gen = PermutationGenerator(3, "abcdef")
    head = [gen.next_candidate() for _ in range(17)]
    data = gen.state.to_dict()

    resumed = PermutationGenerator(state=PermutationState.from_dict(data))
    tail = _drain(resumed)
    assert head + tail == ["".join(p) for p in itertools.permutations("abcdef", 3)]
