"""
Error taxonomy for a ranking run.

Every error that should end a run with a readable message derives from
WordScoreError; the CLI catches that base class at the top level.
"""


class WordScoreError(Exception):
    """Base class for user-facing failures."""


class InputReadFailure(WordScoreError):
    """The word-list file is missing or unreadable."""


class EmptyCandidateSet(WordScoreError, ValueError):
    """No candidate answers are left to score against."""


class MalformedArguments(WordScoreError, ValueError):
    """Command-line guess/feedback arguments can't be interpreted."""
