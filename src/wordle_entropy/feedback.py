from __future__ import annotations
from collections import Counter
from enum import Enum
from typing import Tuple

from .errors import InvalidFeedbackFormat

WORD_LENGTH = 5


class Mark(str, Enum):
    """Per-position feedback: g=exact, y=present elsewhere, b=absent."""
    EXACT = "g"
    PRESENT = "y"
    ABSENT = "b"


Pattern = Tuple[Mark, ...]

SOLVED: Pattern = (Mark.EXACT,) * WORD_LENGTH

# Every spelling of a mark a user may type or paste.
_SYMBOLS = {
    "g": Mark.EXACT,
    "y": Mark.PRESENT,
    "b": Mark.ABSENT,
    "k": Mark.ABSENT,
    "🟩": Mark.EXACT,
    "🟨": Mark.PRESENT,
    "⬛": Mark.ABSENT,
    "⬜": Mark.ABSENT,
}


def simulate(guess: str, answer: str) -> Pattern:
    """
    Pattern a player would see for ``guess`` if the secret were ``answer``.
    Exact matches are claimed first so repeated letters are never over-credited.
    """
    if len(guess) != len(answer):
        raise ValueError(f"guess length ({len(guess)}) != answer length ({len(answer)})")

    res = [Mark.ABSENT] * len(guess)
    remaining = Counter(answer)

    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            res[i] = Mark.EXACT
            remaining[g] -= 1

    for i, g in enumerate(guess):
        if res[i] is Mark.EXACT:
            continue
        if remaining[g] > 0:
            res[i] = Mark.PRESENT
            remaining[g] -= 1

    return tuple(res)


def pattern_str(pattern: Pattern) -> str:
    return "".join(m.value for m in pattern)


def parse_feedback(text: str) -> Pattern:
    """Parse g/y/b (or G/Y/K, or tile emoji) into a pattern."""
    s = (text or "").strip().lower().replace("\ufe0f", "")
    marks = [_SYMBOLS.get(ch) for ch in s]
    if len(marks) != WORD_LENGTH or None in marks:
        raise InvalidFeedbackFormat(
            f"invalid feedback {text!r}: use 5 of g/y/b, G/Y/K or 🟩/🟨/⬛"
        )
    return tuple(marks)


def as_pattern(marks) -> Pattern:
    """Pattern from a feedback string or a sequence of marks (or their g/y/b codes)."""
    if isinstance(marks, str):
        return parse_feedback(marks)
    try:
        pattern = tuple(Mark(m) for m in marks)
    except (TypeError, ValueError):
        raise InvalidFeedbackFormat(f"invalid feedback {marks!r}: marks must be g/y/b") from None
    if len(pattern) != WORD_LENGTH:
        raise InvalidFeedbackFormat(f"feedback must have {WORD_LENGTH} marks, got {len(pattern)}")
    return pattern


def is_solved(pattern: Pattern) -> bool:
    return tuple(pattern) == SOLVED
