import itertools

import pytest
from wordlescore.engine import (Constraint, Mark, MalformedArguments, derive_constraint,
                                derive_constraint_from_feedback, filter_candidates,
                                is_consistent, is_hard_mode, parse_history, validate_guess)

WORDS = ["crane", "trace", "eerie", "tepid", "level", "hello", "speed",
         "steal", "abbey", "babes", "theft", "lemon", "curds", "crisp"]


# --- marks derived from a known answer (no multiplicity cap) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("abcde", "abcde", "ggggg"),
    ("crane", "trace", "ygg-g"),
    ("eerie", "tepid", "yg-gy"),
    ("level", "hello", "yg-yy"),
    ("zzzzz", "abcde", "-----"),
    ("abbey", "babes", "yygg-"),
])
def test_derive_constraint_golden(guess, answer, expected):
    assert derive_constraint(guess, answer).as_feedback() == expected


def test_derive_constraint_from_feedback_codes():
    c = derive_constraint_from_feedback("crane", "GyX-b")
    assert c.guess == "crane"
    assert c.marks == (Mark.CORRECT, Mark.PRESENT, Mark.ABSENT, Mark.ABSENT, Mark.ABSENT)


@pytest.mark.parametrize("candidate,expected", [
    ("curds", True),    # c in place, r elsewhere, no a/n/e
    ("crisp", False),   # r in the guessed spot can't be "present"
    ("scrub", False),   # c not in place
    ("carob", False),   # contains a grey letter
])
def test_is_consistent_per_position(candidate, expected):
    c = derive_constraint_from_feedback("crane", "gy---")
    assert is_consistent(c, candidate) is expected


def test_is_consistent_accepts_plain_ints():
    c = Constraint("abcde", (2, 2, 2, 2, 2))
    assert is_consistent(c, "abcde")
    assert not is_consistent(c, "abcdf")


def test_answer_always_consistent_with_its_own_marks():
    for g, a in itertools.product(WORDS + ["zzzzz", "eeeee"], WORDS):
        assert is_consistent(derive_constraint(g, a), a), (g, a)


def test_grey_duplicate_rejects_green_letter():
    # 'e' is green at index 2 but grey at index 3, so any word with an 'e' goes
    assert filter_candidates(["theft", "steal"], [("speed", "--g--")]) == []


def test_filter_candidates_keeps_solved_word():
    assert filter_candidates(["abcde", "fghij"], [("abcde", "ggggg")]) == ["abcde"]


def test_filter_candidates_empty_history_is_identity():
    out = filter_candidates(WORDS, [])
    assert out == WORDS and out is not WORDS


def test_filter_candidates_narrows_monotonically():
    steps = [("crane", "-y--y"), ("tepid", "-g---"), ("hello", "-g-yy")]
    sizes = [len(filter_candidates(WORDS, steps[:k])) for k in range(len(steps) + 1)]
    assert sizes == sorted(sizes, reverse=True)
    assert sizes[-1] < sizes[0]


def test_filter_candidates_same_step_twice_is_idempotent():
    step = ("crane", "-y--y")
    assert filter_candidates(WORDS, [step, step]) == filter_candidates(WORDS, [step])


# --- argument parsing ---
def test_parse_history_pairs_tokens():
    assert parse_history(["CRANE", "GY---", "sloth", "--Y--"]) == [
        ("crane", "gy---"), ("sloth", "--y--")]
    assert parse_history([]) == []


@pytest.mark.parametrize("tokens", [
    ["crane"],                    # guess without feedback
    ["crane", "gy---", "sloth"],
    ["cr4ne", "gy---"],           # not letters
    ["cranes", "gy---"],          # too long
    ["crane", "gy"],              # short feedback
])
def test_parse_history_rejects_malformed(tokens):
    with pytest.raises(MalformedArguments):
        parse_history(tokens)


def test_validate_guess_normalizes():
    assert validate_guess(" Crane ") == "crane"
    with pytest.raises(ValueError):
        validate_guess("???")


@pytest.mark.parametrize("flag,expected", [("h", True), ("H", True), ("n", False),
                                           ("hard", False), ("", False), (" h", False)])
def test_is_hard_mode(flag, expected):
    assert is_hard_mode(flag) is expected
