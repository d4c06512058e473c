"""
solver/solver_cli.py

Interactive Mastermind-for-words (human-in-the-loop):
- YOU pick a secret word of N distinct letters and keep it to yourself.
- The computer guesses; you reply with the score for each guess:
    a = letters of the guess that are in your word
    b = letters in exactly the right position
- Scores accepted as: '2 1', '2+1', '2,1', '21' or '[2, 1]'.

Run:
  python -m solver.solver_cli --corpus data/dictionary.json --length 5

Commands at the score prompt:
  edit N A B   -> correct the score of guess N (later guesses are discarded)
  check WORD   -> compare every score so far against your secret word
  quit / q / exit  -> exit
"""
from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Optional, Tuple

from wordmind.data_utils import load_corpus
from wordmind.engine import SearchProgress
from wordmind.session import MAX_WORD_LENGTH, MIN_WORD_LENGTH, GameSession
from wordmind.vocab import WordCorpus

QUIT = {"q", "quit", "exit"}


def parse_score(s: str) -> Tuple[int, int]:
    """Parse a two-number score into (a, b).
    Accepted forms:
      - separated: '2 1', '2+1', '2,1', '[2, 1]'
      - packed:    '21'  (single digits only)
    Raises ValueError on invalid input.
    """
    s = s.strip()
    nums = re.findall(r"\d+", s)
    if len(nums) == 1 and len(nums[0]) == 2:
        nums = list(nums[0])
    if len(nums) != 2:
        raise ValueError("score must be two numbers, e.g. '2 1' or '2+1'")
    return int(nums[0]), int(nums[1])


def _print_progress(progress: SearchProgress) -> None:
    state = "searching" if progress.is_searching else "done"
    end = "\r" if progress.is_searching else "\n"
    print(f"  [{state}] {progress.current_word.upper():<16} checked {progress.checked_count:,}", end=end, flush=True)


def _print_history(session: GameSession) -> None:
    for i, entry in enumerate(session.history, 1):
        print(f"  {i:>2}. {entry.word.upper()}  {entry.a}+{entry.b}")


def _check(session: GameSession, word: str) -> None:
    errors = session.validate_scores(word)
    if not errors:
        print(f"All scores are consistent with {word.upper()}.")
        return
    for e in errors:
        actual = f"{e.actual.a}+{e.actual.b}" if e.actual else "n/a"
        print(f"  guess {e.guess_number} {e.guess.upper()}: reported {e.reported.a}+{e.reported.b}, actual {actual}")
    answer = input("Fix these scores automatically? [y/N] ").strip().lower()
    if answer in {"y", "yes"}:
        try:
            changed = session.fix_scoring_errors(word)
        except ValueError as e:
            print("Cannot fix scores:", e)
            return
        print(f"Corrected {len(changed)} score(s).")
        _print_history(session)


def _handle_command(session: GameSession, line: str) -> Optional[str]:
    """Run an edit/check command. Returns 'quit', 'replan', 'retry' (bad usage) or None when the line is not a command."""
    parts = line.split()
    if not parts:
        return None
    cmd = parts[0].lower()
    if cmd in QUIT:
        return "quit"
    if cmd == "edit":
        if len(parts) != 4:
            print("usage: edit N A B")
            return "retry"
        try:
            index, a, b = int(parts[1]) - 1, int(parts[2]), int(parts[3])
            session.update_score(index, a, b)
        except (ValueError, IndexError) as e:
            print("Invalid edit:", e)
            return "retry"
        _print_history(session)
        return "replan"
    if cmd == "check":
        if len(parts) != 2:
            print("usage: check WORD")
            return "retry"
        _check(session, parts[1].lower())
        return "replan"
    return None


def play(session: GameSession) -> None:
    guess = session.next_guess()
    while True:
        if session.is_won:
            print(f"Solved in {len(session.history)} guesses!")
            return
        if guess is None:
            print("No word fits the scores so far. Use 'check WORD' to find a scoring error, or 'quit'.")
        else:
            print(f"\nGuess {len(session.history) + 1}: {guess.upper()}")

        line = input("Score (a b), or a command: ").strip()
        action = _handle_command(session, line)
        if action == "quit":
            print("bye!")
            return
        if action == "replan":
            guess = session.next_guess()
            continue
        if action == "retry" or guess is None:
            continue

        try:
            a, b = parse_score(line)
            session.submit_score(a, b)
        except ValueError as e:
            print("Invalid score:", e)
            continue
        guess = session.next_guess()


def main(argv: Optional[list] = None) -> int:
    ap = argparse.ArgumentParser(description="Mastermind for words: the computer guesses your word")
    ap.add_argument("--corpus", default=None, help="Dictionary JSON or CSV with a 'word' column")
    ap.add_argument("--length", type=int, default=5, help=f"Word length ({MIN_WORD_LENGTH}-{MAX_WORD_LENGTH})")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed for dictionary list choice and shuffle")
    ap.add_argument("--verbose", action="store_true", help="Log solver tier decisions")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    corpus: Optional[WordCorpus] = None
    if args.corpus:
        try:
            corpus = load_corpus(args.corpus)
        except (OSError, KeyError, ValueError) as e:
            print(f"Could not load corpus {args.corpus}: {e}", file=sys.stderr)
            return 1

    try:
        session = GameSession(args.length, corpus, rng_seed=args.seed, on_progress=_print_progress)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2

    print(f"\nThink of a {args.length}-letter word with no repeated letters.")
    print("After each guess type the score 'a b' (a = letters in your word, b = letters in place).")
    print("Commands: edit N A B, check WORD, quit.\n")
    try:
        play(session)
    except (EOFError, KeyboardInterrupt):
        print("\nbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
