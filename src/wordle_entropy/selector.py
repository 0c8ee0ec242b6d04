"""Next-guess selection: opener shortcut, trivial pools, sampled argmax."""
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from .constraints import ConstraintState, Confirmed, Elsewhere, filter_pool
from .entropy import score
from .errors import UnloadedVocabulary

logger = logging.getLogger(__name__)

# Precomputed opener for uniform answers over the 5-letter list.
OPENER = "tares"
OPENER_BITS = 6.16

# Max guesses scored per turn; each costs O(len(pool)).
SAMPLE_BUDGET = 8000


class Outcome(str, Enum):
    GUESS = "guess"
    UNIQUE = "unique"
    NO_SOLUTION = "no_solution"
    SOLVED = "solved"


@dataclass(frozen=True)
class Selection:
    guess: Optional[str]
    score: float
    remaining: int
    outcome: Outcome = Outcome.GUESS
    message: str = ""

    @property
    def finished(self) -> bool:
        return self.outcome in (Outcome.NO_SOLUTION, Outcome.SOLVED)

    def to_dict(self) -> dict:
        return {
            "guess": self.guess,
            "score": round(self.score, 4),
            "remaining": self.remaining,
            "outcome": self.outcome.value,
            "message": self.message,
        }


def evaluation_set(pool: List[str], budget: int = SAMPLE_BUDGET, rng=None) -> List[str]:
    """Guesses worth scoring: the whole pool, or a uniform sample of ``budget``."""
    if budget < 1:
        raise ValueError(f"sample budget must be at least 1, got {budget}")
    if len(pool) <= budget:
        return pool
    rng = rng or random.Random()
    logger.debug("sampling %d of %d candidates", budget, len(pool))
    return rng.sample(pool, budget)


def select(
    word_list: Sequence[str],
    confirmed: Confirmed,
    elsewhere: Elsewhere,
    excluded: Iterable[str],
    is_first_turn: bool,
    *,
    rng=None,
    budget: int = SAMPLE_BUDGET,
) -> Selection:
    """
    Pick the guess with the highest expected information gain.

    Only words still in the candidate pool are considered, and each is scored
    against the full pool. Ties keep the first word seen.
    """
    if budget < 1:
        raise ValueError(f"sample budget must be at least 1, got {budget}")
    if not word_list:
        raise UnloadedVocabulary("word list is empty; wait for it to load")

    if is_first_turn:
        return Selection(OPENER, OPENER_BITS, len(word_list), Outcome.GUESS, "Opening guess.")

    pool = filter_pool(word_list, confirmed, elsewhere, excluded)
    if not pool:
        return Selection(None, 0.0, 0, Outcome.NO_SOLUTION, "No possible answers left.")
    if len(pool) == 1:
        return Selection(pool[0], 0.0, 1, Outcome.UNIQUE, "Only one possible answer.")

    best: Optional[str] = None
    best_bits = -1.0
    for guess in evaluation_set(pool, budget, rng):
        bits = score(guess, pool)
        if bits > best_bits:
            best, best_bits = guess, bits

    logger.debug("best %s (%.3f bits) of %d candidates", best, best_bits, len(pool))
    return Selection(best, best_bits, len(pool), Outcome.GUESS)


def select_for(
    word_list: Sequence[str],
    state: ConstraintState,
    is_first_turn: bool,
    **kwargs,
) -> Selection:
    return select(word_list, state.confirmed, state.elsewhere, state.excluded, is_first_turn, **kwargs)
