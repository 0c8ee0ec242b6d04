from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .selector import SAMPLE_BUDGET

ENV_PREFIX = "WORDLE_ENTROPY_"


def _env_int(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX + name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Runtime options; command-line flags override the environment."""
    words_path: Optional[str] = None
    wordfreq_lang: Optional[str] = None
    sample_budget: int = SAMPLE_BUDGET
    seed: Optional[int] = None
    log_level: str = "WARNING"
    load_timeout: float = 30.0

    def __post_init__(self) -> None:
        if self.sample_budget < 1:
            raise ValueError(f"sample_budget must be at least 1, got {self.sample_budget}")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        budget = _env_int(env, "SAMPLE_BUDGET")
        if budget is not None and budget < 1:
            raise ValueError(f"{ENV_PREFIX}SAMPLE_BUDGET must be at least 1, got {budget}")
        return cls(
            words_path=env.get(ENV_PREFIX + "WORDS") or None,
            wordfreq_lang=env.get(ENV_PREFIX + "WORDFREQ") or None,
            sample_budget=SAMPLE_BUDGET if budget is None else budget,
            seed=_env_int(env, "SEED"),
            log_level=(env.get(ENV_PREFIX + "LOG_LEVEL") or "WARNING").upper(),
        )
