"""Entropy-maximizing solver for five-letter word-guessing games."""
from .constraints import ConstraintState, apply_feedback, filter_pool
from .entropy import ScoredGuess, rank, score
from .errors import (
    ConflictingFeedback,
    GameNotActive,
    InvalidFeedbackFormat,
    InvalidWord,
    SolverError,
    UnloadedVocabulary,
)
from .feedback import Mark, parse_feedback, pattern_str, simulate
from .selector import OPENER, OPENER_BITS, SAMPLE_BUDGET, Outcome, Selection, select
from .session import Game, Status

__version__ = "0.1.0"
