"""Accumulated letter constraints and the candidate filter built on them.

A ``ConstraintState`` is an immutable value: applying feedback returns a new
state, so a rejected pattern can never leave a half-applied state behind.

Multiplicity is not tracked. A letter that is excluded but also required by
some ``elsewhere`` set counts as required; exclusion only bites for letters no
``elsewhere`` set asks for.
"""
from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from .errors import ConflictingFeedback, InvalidWord
from .feedback import WORD_LENGTH, Mark, Pattern, as_pattern

logger = logging.getLogger(__name__)

WORD_RE = re.compile(rf"[a-z]{{{WORD_LENGTH}}}")

Confirmed = Sequence[Optional[str]]
Elsewhere = Sequence[Iterable[str]]


def filter_pool(
    pool: Iterable[str],
    confirmed: Confirmed,
    elsewhere: Elsewhere,
    excluded: Iterable[str],
) -> List[str]:
    """Words of ``pool`` consistent with all three constraint kinds, in pool order."""
    banned_at = [frozenset(s) for s in elsewhere]
    required = frozenset().union(*banned_at)
    blocked = frozenset(excluded) - required
    pinned = [(i, ch) for i, ch in enumerate(confirmed) if ch]

    out: List[str] = []
    for word in pool:
        if any(word[i] != ch for i, ch in pinned):
            continue
        if any(ch in banned or ch in blocked for ch, banned in zip(word, banned_at)):
            continue
        if not required.issubset(word):
            continue
        out.append(word)
    return out


@dataclass(frozen=True)
class ConstraintState:
    confirmed: Tuple[Optional[str], ...] = (None,) * WORD_LENGTH
    elsewhere: Tuple[FrozenSet[str], ...] = (frozenset(),) * WORD_LENGTH
    excluded: FrozenSet[str] = frozenset()

    @property
    def is_empty(self) -> bool:
        return not (any(self.confirmed) or any(self.elsewhere) or self.excluded)

    def filter(self, pool: Iterable[str]) -> List[str]:
        return filter_pool(pool, self.confirmed, self.elsewhere, self.excluded)

    def to_dict(self) -> dict:
        return {
            "confirmed": [ch or "" for ch in self.confirmed],
            "elsewhere": [sorted(s) for s in self.elsewhere],
            "excluded": sorted(self.excluded),
        }


def apply_feedback(state: ConstraintState, guess: str, pattern: Pattern) -> ConstraintState:
    """
    Fold one (guess, pattern) pair into ``state`` and return the new state.

    An absent mark only excludes its letter when the same guess does not also
    mark that letter exact or present somewhere else.
    """
    if not isinstance(guess, str) or not WORD_RE.fullmatch(guess):
        raise InvalidWord(f"invalid guess {guess!r}: use 5 letters a-z")
    pattern = as_pattern(pattern)

    confirmed = list(state.confirmed)
    elsewhere = [set(s) for s in state.elsewhere]
    excluded = set(state.excluded)
    hit = {ch for ch, m in zip(guess, pattern) if m is not Mark.ABSENT}

    for i, (ch, mark) in enumerate(zip(guess, pattern)):
        if mark is Mark.EXACT:
            if confirmed[i] not in (None, ch):
                raise ConflictingFeedback(
                    f"position {i + 1} is already {confirmed[i]!r}, feedback says {ch!r}"
                )
            if ch in elsewhere[i]:
                raise ConflictingFeedback(
                    f"{ch!r} was already ruled out at position {i + 1}"
                )
            confirmed[i] = ch
        elif mark is Mark.PRESENT:
            if confirmed[i] == ch:
                raise ConflictingFeedback(
                    f"{ch!r} is already confirmed at position {i + 1}"
                )
            elsewhere[i].add(ch)
        elif ch not in hit:
            excluded.add(ch)

    new = ConstraintState(
        confirmed=tuple(confirmed),
        elsewhere=tuple(frozenset(s) for s in elsewhere),
        excluded=frozenset(excluded),
    )
    logger.debug("applied %s: %s", guess, new.to_dict())
    return new
