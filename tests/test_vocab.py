import random

import pandas as pd
import pytest

from wordmind.data_utils import load_corpus
from wordmind.sampler import DictionaryCursor
from wordmind.vocab import WordCorpus


DICTIONARY = {
    "wordSets": {
        "5-letter": [
            {"name": "common", "set": [{"word": "Crane"}, {"word": "slate"}, {"word": "hello"}]},
            {"set": [{"word": "pious"}, {"word": "pious"}]},
            {"name": "broken", "set": [{"word": "aaaaa"}]},
        ],
        "4-letter": [{"name": "short", "set": [{"word": "wolf"}]}],
        "misc": [{"set": [{"word": "zzz"}]}],
    }
}


def test_from_dictionary_data():
    corpus = WordCorpus.from_dictionary_data(DICTIONARY)
    assert corpus.lengths() == [4, 5]
    assert corpus.lists_for(5) == {"common": ["crane", "slate"], "set-1": ["pious"]}
    assert corpus.words_for(4) == ["wolf"]
    assert len(corpus) == 4


def test_missing_word_sets_gives_empty_corpus():
    corpus = WordCorpus.from_dictionary_data({"other": 1})
    assert len(corpus) == 0
    assert corpus.lists_for(5) == {}


def test_from_csv_with_sets(tmp_path):
    path = tmp_path / "words.csv"
    pd.DataFrame(
        {"word": ["crane", "SLATE", "hello", "wolf", None], "set": ["a", "a", "a", None, "b"]}
    ).to_csv(path, index=False)

    corpus = WordCorpus.from_csv(str(path))
    assert corpus.lists_for(5) == {"a": ["crane", "slate"]}
    assert corpus.lists_for(4) == {"default": ["wolf"]}


def test_from_csv_missing_column(tmp_path):
    path = tmp_path / "words.csv"
    pd.DataFrame({"token": ["crane"]}).to_csv(path, index=False)
    with pytest.raises(KeyError):
        WordCorpus.from_csv(str(path))


def test_load_corpus_dispatches_on_suffix(tmp_path):
    path = tmp_path / "dictionary.json"
    path.write_text('{"wordSets": {"4-letter": [{"set": [{"word": "dusk"}]}]}}', encoding="utf-8")
    assert load_corpus(str(path)).words_for(4) == ["dusk"]
    with pytest.raises(ValueError):
        load_corpus(str(tmp_path / "words.txt"))


def test_rejects_bad_keys():
    with pytest.raises(ValueError):
        WordCorpus({"5": {"x": ["crane"]}})
    with pytest.raises(TypeError):
        WordCorpus(["crane"])


def test_cursor_draws_every_word_once_in_shuffled_order():
    corpus = WordCorpus.from_words(["crane", "slate", "pious", "bumpy", "wordy"])
    cursor = DictionaryCursor(corpus, 5, random.Random(0))
    drawn = []
    while (word := cursor.next_word(set())) is not None:
        drawn.append(word)
    assert sorted(drawn) == ["bumpy", "crane", "pious", "slate", "wordy"]
    assert cursor.exhausted
    assert cursor.next_word(set()) is None


def test_cursor_skips_used_words_and_never_rewinds():
    corpus = WordCorpus.from_words(["crane", "slate", "pious"])
    cursor = DictionaryCursor(corpus, 5, random.Random(2))
    first = cursor.next_word(set())
    rest = []
    while (word := cursor.next_word({first})) is not None:
        rest.append(word)
    assert first not in rest
    assert len(rest) == 2


def test_cursor_is_deterministic_with_seed():
    corpus = WordCorpus.from_dictionary_data(DICTIONARY)
    a = DictionaryCursor(corpus, 5, random.Random(11))
    b = DictionaryCursor(corpus, 5, random.Random(11))
    assert a.set_name == b.set_name
    assert [a.next_word(set()) for _ in range(3)] == [b.next_word(set()) for _ in range(3)]


def test_cursor_without_corpus():
    cursor = DictionaryCursor(None, 5)
    assert len(cursor) == 0
    assert cursor.next_word(set()) is None


def test_accepts_any_iterable_of_words():
    corpus = WordCorpus({5: {"x": (w for w in ["crane", "slate", "hello"])}})
    assert corpus.lists_for(5) == {"x": ["crane", "slate"]}
