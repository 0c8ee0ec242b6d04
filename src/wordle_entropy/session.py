"""One game: the guess in play, accumulated constraints and history."""
from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Union

from .constraints import ConstraintState, apply_feedback
from .errors import GameNotActive
from .feedback import Pattern, as_pattern, is_solved, pattern_str
from .selector import SAMPLE_BUDGET, Outcome, Selection, select_for

logger = logging.getLogger(__name__)


class Status(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    SOLVED = "solved"
    NO_SOLUTION = "no_solution"


@dataclass(frozen=True)
class GuessRecord:
    word: str
    pattern: Pattern
    remaining: int

    def to_dict(self) -> dict:
        return {"guess": self.word, "feedback": pattern_str(self.pattern), "remaining": self.remaining}


@dataclass
class Game:
    words: Sequence[str]
    rng: Optional[random.Random] = None
    budget: int = SAMPLE_BUDGET
    constraints: ConstraintState = field(default_factory=ConstraintState)
    history: List[GuessRecord] = field(default_factory=list)
    current_guess: Optional[str] = None
    last: Optional[Selection] = None
    status: Status = Status.IDLE

    @property
    def active(self) -> bool:
        return self.status is Status.ACTIVE

    def candidates(self) -> List[str]:
        return self.constraints.filter(self.words)

    def _select(self, first: bool) -> Selection:
        return select_for(self.words, self.constraints, first, rng=self.rng, budget=self.budget)

    def new_game(self) -> Selection:
        """Forget everything and return the opening guess."""
        self.constraints = ConstraintState()
        self.history = []
        sel = self._select(first=True)
        self.current_guess = sel.guess
        self.last = sel
        self.status = Status.ACTIVE
        logger.debug("new game over %d words, opener %s", len(self.words), sel.guess)
        return sel

    def submit(self, feedback: Union[str, Pattern], guess: Optional[str] = None) -> Selection:
        """
        Apply feedback for the guess in play (or for ``guess`` when the player
        typed something else) and return the next selection.

        Invalid or conflicting feedback raises before anything changes.
        """
        if not self.active:
            raise GameNotActive("no game in progress; start a new game first")

        word = (guess or self.current_guess or "").strip().lower()
        pattern = as_pattern(feedback)
        new_state = apply_feedback(self.constraints, word, pattern)

        before = len(self.candidates())
        self.constraints = new_state
        remaining = len(self.candidates())
        self.history.append(GuessRecord(word, pattern, remaining))
        logger.debug("%s -> %s: candidates %d -> %d", word, pattern_str(pattern), before, remaining)

        if is_solved(pattern):
            self.status = Status.SOLVED
            self.current_guess = None
            sel = Selection(
                word, 0.0, remaining, Outcome.SOLVED,
                f"Solved {word!r} in {len(self.history)} guesses.",
            )
        else:
            sel = self._select(first=False)
            self.current_guess = sel.guess
            if sel.outcome is Outcome.NO_SOLUTION:
                self.status = Status.NO_SOLUTION
        self.last = sel
        return sel

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "current_guess": self.current_guess,
            "attempts": len(self.history),
            "candidates": len(self.candidates()),
            "constraints": self.constraints.to_dict(),
            "history": [r.to_dict() for r in self.history],
        }
