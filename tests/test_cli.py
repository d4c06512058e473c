import pytest

from solver.self_play import play_game, run_self_play, summarize
from solver.solver_cli import parse_score
from wordmind.session import GameSession


@pytest.mark.parametrize("text,expected", [
    ("2 1", (2, 1)),
    ("2+1", (2, 1)),
    ("2,1", (2, 1)),
    ("[2, 1]", (2, 1)),
    ("21", (2, 1)),
    (" 5 5 ", (5, 5)),
])
def test_parse_score(text, expected):
    assert parse_score(text) == expected


@pytest.mark.parametrize("text", ["", "2", "abc", "1 2 3", "123"])
def test_parse_score_rejects(text):
    with pytest.raises(ValueError):
        parse_score(text)


def test_play_game_solves_by_self_scoring():
    row = play_game(GameSession(4), "abce")
    # abcd (3+3) -> differentiating guess efgh (1+0) -> search finds abce
    assert row["solved"] is True
    assert row["sequence"] == "abcd efgh abce"
    assert row["guesses"] == 3


def test_run_self_play_summary():
    df = run_self_play(4, ["abce"], games=2, progress=False)
    assert len(df) == 2
    stats = summarize(df)
    assert stats["solve_rate"] == 1.0
    assert stats["mean_guesses"] == 3.0
