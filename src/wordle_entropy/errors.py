"""Exceptions raised by the solver.

Empty candidate pools are not errors: they come back from ``select`` as a
``NO_SOLUTION`` selection.
"""


class SolverError(Exception):
    """Base class for every solver error."""


class InvalidFeedbackFormat(SolverError, ValueError):
    """Feedback is not exactly 5 symbols from the accepted alphabets."""


class InvalidWord(SolverError, ValueError):
    """A played word is not 5 letters a-z."""


class ConflictingFeedback(SolverError, ValueError):
    """Feedback would contradict what is already pinned at a position."""


class UnloadedVocabulary(SolverError, RuntimeError):
    """A guess was requested before the word list finished loading."""


class GameNotActive(SolverError, RuntimeError):
    """Feedback was submitted with no game in progress."""
