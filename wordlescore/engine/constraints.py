"""
Feedback matching and candidate filtering.

A Constraint records, for each of the five positions of a guess, one of:
  - CORRECT : the letter is in that exact position
  - PRESENT : the letter is in the word, but not at that position
  - ABSENT  : the letter is not in the word at all

Constraints come from either a known answer (simulating a round) or from a
feedback string typed by a player ('g' = correct, 'y' = present, anything
else = absent).

Duplicate letters are NOT bounded by their multiplicity in the answer: every
position is judged on its own. Guessing "eerie" against "tepid" marks all
three e's as PRESENT/CORRECT, where the official game would grey some of them.
Likewise an ABSENT position rejects every candidate that contains the letter
anywhere, even if another position of the same guess marks it CORRECT.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Tuple

WORD_LENGTH = 5

# (guess, feedback) pairs in the order they were played
History = Iterable[Tuple[str, str]]


class Mark(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


@dataclass(frozen=True)
class Constraint:
    """Per-position marks for one guess."""
    guess: str
    marks: Tuple[Mark, Mark, Mark, Mark, Mark]

    def as_feedback(self) -> str:
        """Render as a 'g'/'y'/'-' string, e.g. 'gy--g'."""
        return "".join("g" if m == Mark.CORRECT else "y" if m == Mark.PRESENT else "-"
                       for m in self.marks)


def derive_constraint(guess: str, answer: str) -> Constraint:
    """
    Marks `guess` would receive if `answer` were the hidden word.

    Examples:
      derive_constraint("crane", "trace").as_feedback() -> "ygg-g"
      derive_constraint("eerie", "tepid").as_feedback() -> "yg-gy"
    """
    marks = []
    for g, a in zip(guess, answer):
        if g == a:
            marks.append(Mark.CORRECT)
        elif g in answer:
            marks.append(Mark.PRESENT)
        else:
            marks.append(Mark.ABSENT)
    return Constraint(guess, tuple(marks))


def derive_constraint_from_feedback(guess: str, feedback: str) -> Constraint:
    """
    Marks from a player-supplied feedback code (case-insensitive).
    'g' -> CORRECT, 'y' -> PRESENT, any other character -> ABSENT.
    """
    marks = []
    for code in feedback.lower():
        if code == "g":
            marks.append(Mark.CORRECT)
        elif code == "y":
            marks.append(Mark.PRESENT)
        else:
            marks.append(Mark.ABSENT)
    return Constraint(guess, tuple(marks))


def is_consistent(constraint: Constraint, candidate: str) -> bool:
    """
    True if `candidate` could still be the answer given `constraint`.

    Each position is checked independently, in guess order:
      CORRECT : candidate has the guess letter at this position
      PRESENT : candidate has the letter, but not at this position
      ABSENT  : candidate doesn't contain the letter anywhere
    """
    for i, (g, mark) in enumerate(zip(constraint.guess, constraint.marks)):
        if mark == Mark.CORRECT:
            if candidate[i] != g:
                return False
        elif mark == Mark.PRESENT:
            if candidate[i] == g or g not in candidate:
                return False
        elif g in candidate:
            return False
    return True


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words consistent with EVERY (guess, feedback) pair in `history`.

    Pairs are applied in order, each one narrowing the survivors of the
    previous step, so the result never grows as history gets longer. With no
    history the words come back unchanged (as a new list, order preserved).
    """
    out: List[str] = list(words)
    for guess, feedback in history:
        constraint = derive_constraint_from_feedback(guess, feedback)
        out = [w for w in out if is_consistent(constraint, w)]
    return out
