"""
Expected remaining candidates for a single guess.

For guess g and candidate set C (|C| = n):
  score_guess(g, C)   = sum over answers a in C of
                        #{ w in C : w is consistent with the marks g gets vs a }
  average_score(g, C) = score_guess(g, C) / n

Lower is better: on average fewer words survive after playing g.

Under the per-position marking rule (see constraints.py), w is consistent
with the marks derived from a exactly when w itself would earn the same
marks as a. So C splits into buckets by mark vector, every answer in a
bucket of size c leaves c survivors, and
  score_guess(g, C) = sum_i c_i^2
which is what we compute: one vectorized pass instead of n^2 checks.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from .constraints import WORD_LENGTH, derive_constraint, is_consistent
from .errors import EmptyCandidateSet

# Mark vector -> base-3 code (ABSENT=0, PRESENT=1, CORRECT=2 per position)
_PLACE = 3 ** np.arange(WORD_LENGTH, dtype=np.int64)
N_PATTERNS = 3 ** WORD_LENGTH

Words = Union[Sequence[str], np.ndarray]


def encode_words(words: Sequence[str]) -> np.ndarray:
    """
    Pack words into an (n, 5) uint8 matrix of ASCII codes.

    Raises ValueError if any word isn't exactly five ASCII characters.
    """
    if any(len(w) != WORD_LENGTH for w in words):
        raise ValueError(f"every word must have exactly {WORD_LENGTH} letters")
    if not words:
        return np.empty((0, WORD_LENGTH), dtype=np.uint8)
    buf = "".join(words).encode("ascii")
    return np.frombuffer(buf, dtype=np.uint8).reshape(-1, WORD_LENGTH)


def _as_matrix(words: Words) -> np.ndarray:
    if isinstance(words, np.ndarray):
        return words
    return encode_words(list(words))


def mark_codes(guess: Union[str, np.ndarray], candidates: Words) -> np.ndarray:
    """Base-3 code of the marks `guess` earns against each candidate."""
    row = encode_words([guess])[0] if isinstance(guess, str) else guess
    mat = _as_matrix(candidates)

    correct = mat == row
    # contains[k, j]: candidate k has guess letter j somewhere
    contains = (mat[:, :, None] == row[None, None, :]).any(axis=1)
    # correct implies contains, so this is 0/1/2 per position
    marks = correct.astype(np.int64) + contains
    return marks @ _PLACE


def score_guess(guess: Union[str, np.ndarray], candidates: Words) -> int:
    """Total survivors of `guess`, summed over every candidate as the answer."""
    codes = mark_codes(guess, candidates)
    if codes.size == 0:
        return 0
    buckets = np.bincount(codes, minlength=N_PATTERNS)
    return int(np.dot(buckets, buckets))


def average_score(guess: Union[str, np.ndarray], candidates: Words) -> float:
    """
    Expected number of candidates left after playing `guess`.

    Raises EmptyCandidateSet if there are no candidates to average over.
    """
    n = len(candidates)
    if n == 0:
        raise EmptyCandidateSet("no candidate answers left to score against")
    return score_guess(guess, candidates) / n


def count_consistent(guess: str, answer: str, candidates: Sequence[str]) -> int:
    """
    Survivors of `guess` when `answer` is the hidden word.
    Straight word-by-word check; handy as a reference for score_guess.
    """
    constraint = derive_constraint(guess, answer)
    return sum(1 for w in candidates if is_consistent(constraint, w))
