from wordmind.constraints import ScoringError, filter_candidates, find_scoring_errors, is_consistent
from wordmind.feedback import Score, score
from wordmind.state import GuessRecord


def _record(guess, target):
    result = score(target, guess)
    return GuessRecord(guess, result.a, result.b)


def test_pruning_keeps_the_target():
    words = ["brain", "train", "grain", "drain", "crane", "slate"]
    history = [_record("crane", "brain")]  # (3, 2): r, a, n
    remaining = filter_candidates(words, history)
    assert "brain" in remaining
    assert "slate" not in remaining
    assert "crane" not in remaining


def test_pruning_is_monotonic_with_more_feedback():
    words = ["brain", "train", "grain", "drain", "crane", "slate"]
    rem1 = set(filter_candidates(words, [_record("crane", "brain")]))
    rem2 = set(filter_candidates(words, [_record("crane", "brain"), _record("grain", "brain")]))
    assert rem2.issubset(rem1)
    assert rem2 == {"brain", "drain", "train"} & rem1


def test_is_consistent_with_empty_history():
    assert is_consistent("anything", [])


def test_find_scoring_errors_reports_mismatches():
    history = [
        GuessRecord("abcd", 0, 0),
        GuessRecord("efgh", 2, 1),   # wrong, actual (1, 0) against "wxye"
        GuessRecord("wxyz", 3, 3),
    ]
    errors = find_scoring_errors("wxye", history)
    assert errors == [ScoringError(2, "efgh", Score(2, 1), Score(1, 0))]


def test_find_scoring_errors_flags_unscorable_entries():
    errors = find_scoring_errors("abcd", [GuessRecord("abcde", 1, 1)])
    assert errors == [ScoringError(1, "abcde", Score(1, 1), None)]
