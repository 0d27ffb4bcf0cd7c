"""
Validation of player-supplied guesses and feedback.

The command line takes a flat list of tokens:
    guess1 feedback1 guess2 feedback2 ...
A guess must be five ASCII letters; a feedback code must be five characters
('g' = correct, 'y' = present, anything else = absent). Anything that breaks
the pairing is rejected up front, so a guess is never read as feedback or the
other way round.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .constraints import WORD_LENGTH
from .errors import MalformedArguments


def is_valid_word(word: str, N: int = WORD_LENGTH) -> bool:
    """True if `word` is exactly N ASCII letters."""
    return isinstance(word, str) and len(word) == N and word.isascii() and word.isalpha()


def validate_guess(word: str, N: int = WORD_LENGTH) -> str:
    """Return the lowercased guess, or raise MalformedArguments."""
    w = word.strip().lower()
    if not is_valid_word(w, N):
        raise MalformedArguments(f"guess {word!r} is not a {N}-letter word")
    return w


def validate_feedback(code: str, N: int = WORD_LENGTH) -> str:
    """Return the lowercased feedback code, or raise MalformedArguments."""
    c = code.strip().lower()
    if len(c) != N:
        raise MalformedArguments(
            f"feedback {code!r} must have {N} characters (g=correct, y=present, other=absent)")
    return c


def parse_history(tokens: Sequence[str]) -> List[Tuple[str, str]]:
    """
    Pair up alternating guess/feedback tokens.

    Example:
      parse_history(["crane", "gy---", "sloth", "--Y--"])
        -> [("crane", "gy---"), ("sloth", "--y--")]
    """
    if len(tokens) % 2:
        raise MalformedArguments(
            f"expected guess/feedback pairs, got {len(tokens)} token(s); "
            f"last guess {tokens[-1]!r} has no feedback")
    history: List[Tuple[str, str]] = []
    for i in range(0, len(tokens), 2):
        history.append((validate_guess(tokens[i]), validate_feedback(tokens[i + 1])))
    return history


def is_hard_mode(flag: str) -> bool:
    """'h' (any case) selects hard mode; every other value is normal mode."""
    return flag.lower() == "h"
