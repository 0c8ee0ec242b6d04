from __future__ import annotations
import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from .feedback import pattern_str, simulate


@dataclass(frozen=True)
class ScoredGuess:
    word: str
    bits: float
    pool_size: int
    expected_remaining: float = 0.0

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "entropy_bits": round(self.bits, 4),
            "expected_remaining": round(self.expected_remaining, 2),
            "pool_size": self.pool_size,
        }


def pattern_distribution(guess: str, pool: Iterable[str]) -> Dict[str, int]:
    """Count of pool words per pattern (keyed by its g/y/b string) against ``guess``."""
    dist: Dict[str, int] = defaultdict(int)
    for answer in pool:
        dist[pattern_str(simulate(guess, answer))] += 1
    return dict(dist)


def entropy_bits(dist: Dict[str, int]) -> float:
    total = sum(dist.values())
    if total == 0:
        return 0.0
    H = 0.0
    for n in dist.values():
        if n > 0:
            H += (n / total) * math.log2(total / n)
    return H


def expected_remaining(dist: Dict[str, int]) -> float:
    """Pool size left on average after playing the guess."""
    total = sum(dist.values())
    if total == 0:
        return 0.0
    return sum(n * n for n in dist.values()) / total


def score(guess: str, pool: Sequence[str]) -> float:
    """
    Expected information gain in bits of playing ``guess`` against ``pool``.
    0 when every answer yields the same pattern, at most log2(len(pool)).
    """
    return entropy_bits(pattern_distribution(guess, pool))


def rank(guesses: Iterable[str], pool: Sequence[str], top_k: int = 5) -> List[ScoredGuess]:
    """Best ``top_k`` guesses: bits desc, expected remaining asc."""
    scored: List[ScoredGuess] = []
    for w in guesses:
        dist = pattern_distribution(w, pool)
        scored.append(ScoredGuess(w, entropy_bits(dist), len(pool), expected_remaining(dist)))
    scored.sort(key=lambda s: (-s.bits, s.expected_remaining))
    return scored[:top_k]
