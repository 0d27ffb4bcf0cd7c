"""
Ranking harness.

- select_guess_pool: which words may be guessed (hard vs normal mode).
- rank_guesses:      score every allowed guess against the candidate set,
                     spread over a process pool, sorted best (lowest) first.
- run_ranking:       the whole run: filter by history, pick the pool, rank.

No I/O here; the CLI (or a notebook) loads the word list and writes results.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from wordlescore.engine import EmptyCandidateSet, average_score, encode_words, filter_candidates

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredWord:
    word: str
    score: float  # expected candidates left; lower is better

    def to_dict(self) -> Dict:
        return {"word": self.word, "score": self.score}


@dataclass
class RankingResult:
    candidates: List[str]
    scores: List[ScoredWord] = field(default_factory=list)
    hard_mode: bool = False


# ---- worker-side state (one copy per process, never written after init) ----
_CANDIDATES: Optional[np.ndarray] = None


def _init_worker(candidates: np.ndarray) -> None:
    global _CANDIDATES
    _CANDIDATES = candidates


def _score_in_worker(guess: str) -> float:
    return average_score(guess, _CANDIDATES)


def _chunksize(n: int, workers: int) -> int:
    return max(1, n // (workers * 16))


def select_guess_pool(words: Sequence[str], candidates: Sequence[str], hard_mode: bool) -> List[str]:
    """
    Hard mode: only words that can still be the answer may be guessed.
    Normal mode: any word from the full list, eliminated ones included.
    """
    return list(candidates) if hard_mode else list(words)


def rank_guesses(
        candidates: Sequence[str],
        allowed: Sequence[str],
        *,
        workers: Optional[int] = None,
        progress: bool = False,
) -> List[ScoredWord]:
    """
    Score each word in `allowed` by its expected remaining candidates.

    Args:
        candidates: words that may still be the answer (simulated answers)
        allowed:    words to evaluate as guesses
        workers:    process count; None = os.cpu_count(), 1 = run in-process
        progress:   show a tqdm bar on stderr

    Returns:
        One ScoredWord per allowed word, ascending by score. Equal scores keep
        their order from `allowed`.

    Raises EmptyCandidateSet if `candidates` is empty. An exception in any
    guess aborts the whole batch.
    """
    if not candidates:
        raise EmptyCandidateSet("no candidate answers left to score against")

    matrix = encode_words(list(candidates))
    guesses = list(allowed)
    workers = workers or os.cpu_count() or 1
    log.debug("Scoring %d guesses against %d candidates with %d worker(s)",
              len(guesses), len(matrix), workers)

    bar = dict(total=len(guesses), desc="Scoring", unit="guess", disable=not progress)

    if workers == 1 or len(guesses) <= 1:
        scores = [average_score(g, matrix) for g in tqdm(guesses, **bar)]
    else:
        with ProcessPoolExecutor(max_workers=workers,
                                 initializer=_init_worker,
                                 initargs=(matrix,)) as pool:
            it = pool.map(_score_in_worker, guesses, chunksize=_chunksize(len(guesses), workers))
            scores = list(tqdm(it, **bar))

    ranked = [ScoredWord(g, s) for g, s in zip(guesses, scores)]
    ranked.sort(key=lambda r: r.score)
    return ranked


def run_ranking(
        words: Sequence[str],
        history: Iterable[Tuple[str, str]],
        *,
        hard_mode: bool = False,
        workers: Optional[int] = None,
        progress: bool = False,
) -> RankingResult:
    """
    Narrow `words` by `history`, then rank the allowed guesses against what's left.

    Raises EmptyCandidateSet when no word survives the history.
    """
    history = list(history)
    candidates = filter_candidates(words, history)
    log.info("%d of %d words still possible after %d guess(es)",
             len(candidates), len(words), len(history))
    if not candidates:
        raise EmptyCandidateSet(
            "no word in the list matches the given feedback; check the guesses and codes")

    pool = select_guess_pool(words, candidates, hard_mode)
    log.info("Ranking %d guesses (%s mode)", len(pool), "hard" if hard_mode else "normal")

    scores = rank_guesses(candidates, pool, workers=workers, progress=progress)
    return RankingResult(candidates=candidates, scores=scores, hard_mode=hard_mode)
