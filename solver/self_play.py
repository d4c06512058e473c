"""
solver/self_play.py

Let the computer play against itself: pick random secret words, score every
guess automatically and record how many guesses each game takes.

Usage examples:
  python -m solver.self_play --games 50 --length 4
  python -m solver.self_play --corpus data/dictionary.json --games 200 --out self_play.csv

Prints a summary (solve rate, mean / median / p90 guesses, time per game) and
optionally writes one CSV row per game.
"""

from __future__ import annotations

import argparse
import logging
import random
import time
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from wordmind.data_utils import load_corpus
from wordmind.feedback import score
from wordmind.session import GameSession
from wordmind.vocab import WordCorpus
from wordmind.words import generate_unique_letter_words

log = logging.getLogger(__name__)


# -----------------------------
# Simulation core
# -----------------------------

def play_game(session: GameSession, target: str, max_guesses: int = 50) -> Dict[str, object]:
    """Play one auto-scored game. Returns a result row."""
    t0 = time.perf_counter()
    guesses: List[str] = []
    solved = False
    while len(guesses) < max_guesses:
        guess = session.next_guess()
        if guess is None:
            break
        guesses.append(guess)
        result = score(target, guess)
        if session.submit_score(result.a, result.b, guess):
            solved = True
            break
    return {
        "target": target,
        "solved": solved,
        "guesses": len(guesses),
        "sequence": " ".join(guesses),
        "seconds": round(time.perf_counter() - t0, 4),
    }


def run_self_play(
    word_length: int,
    targets: List[str],
    *,
    corpus: Optional[WordCorpus] = None,
    games: int = 100,
    max_guesses: int = 50,
    seed: int = 0,
    progress: bool = True,
) -> pd.DataFrame:
    rng = random.Random(seed)
    rows = []
    for game in range(games):
        target = rng.choice(targets)
        session = GameSession(word_length, corpus, rng_seed=seed + game)
        rows.append(play_game(session, target, max_guesses=max_guesses))
        if progress and (game + 1) % 10 == 0:
            print(f"Played {game + 1}/{games} games...", flush=True)
    return pd.DataFrame(rows, columns=["target", "solved", "guesses", "sequence", "seconds"])


def summarize(df: pd.DataFrame) -> Dict[str, float]:
    solved = df[df["solved"]]
    steps = solved["guesses"].to_numpy()
    seconds = df["seconds"].to_numpy()
    return {
        "games": int(len(df)),
        "solve_rate": round(float(np.mean(df["solved"].to_numpy())) if len(df) else 0.0, 4),
        "mean_guesses": round(float(np.mean(steps)), 3) if steps.size else float("nan"),
        "median_guesses": float(np.median(steps)) if steps.size else float("nan"),
        "p90_guesses": float(np.percentile(steps, 90)) if steps.size else float("nan"),
        "max_guesses": int(np.max(steps)) if steps.size else 0,
        "mean_seconds": round(float(np.mean(seconds)), 4) if seconds.size else float("nan"),
    }


def main():
    ap = argparse.ArgumentParser(description="Self-play benchmark for the guess engine.")
    ap.add_argument("--corpus", default=None, help="Dictionary JSON or CSV; also the source of secret words")
    ap.add_argument("--length", type=int, default=4, help="Word length (4-8)")
    ap.add_argument("--games", type=int, default=100, help="Number of games to play")
    ap.add_argument("--max-guesses", type=int, default=50, help="Give up after this many guesses")
    ap.add_argument("--seed", type=int, default=0, help="RNG seed for targets and engines")
    ap.add_argument("--out", default=None, help="Optional output CSV path")
    ap.add_argument("--verbose", action="store_true", help="Log solver tier decisions")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    corpus = load_corpus(args.corpus) if args.corpus else None
    targets = corpus.words_for(args.length) if corpus is not None else []
    if not targets:
        log.warning("No %d-letter corpus words; generating random secret words", args.length)
        targets = generate_unique_letter_words(args.length, rng=random.Random(args.seed))

    print(f"Playing {args.games} games with {args.length}-letter words ({len(targets)} possible targets)", flush=True)
    t0 = time.perf_counter()
    df = run_self_play(
        args.length, targets, corpus=corpus, games=args.games, max_guesses=args.max_guesses, seed=args.seed
    )
    print(f"Done in {time.perf_counter() - t0:.2f}s", flush=True)
    print(summarize(df))

    if args.out:
        df.to_csv(args.out, index=False)
        print(f"Wrote results to {args.out}")


if __name__ == "__main__":
    main()
