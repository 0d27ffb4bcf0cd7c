from .constraints import (Constraint, Mark, WORD_LENGTH, derive_constraint,
                          derive_constraint_from_feedback, filter_candidates, is_consistent)
from .errors import EmptyCandidateSet, InputReadFailure, MalformedArguments, WordScoreError
from .scoring import average_score, count_consistent, encode_words, score_guess
from .validation import is_hard_mode, parse_history, validate_feedback, validate_guess

__all__ = [
    "Constraint", "Mark", "WORD_LENGTH",
    "derive_constraint", "derive_constraint_from_feedback", "is_consistent", "filter_candidates",
    "score_guess", "average_score", "count_consistent", "encode_words",
    "parse_history", "validate_guess", "validate_feedback", "is_hard_mode",
    "WordScoreError", "InputReadFailure", "EmptyCandidateSet", "MalformedArguments",
]
