# MCP Wordle solver (FastMCP)
# - Opening guess, then next guess by expected information gain
# - Feedback as g/y/b, G/Y/K or 🟩/🟨/⬛
# - Pattern distribution for any guess against the remaining candidates

from __future__ import annotations
import argparse
import dataclasses
import json
import logging
import os
import random
import sys
import threading
from typing import Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from .config import Settings
from .entropy import entropy_bits, expected_remaining, pattern_distribution, rank
from .errors import InvalidWord, SolverError
from .selector import evaluation_set
from .session import Game
from .wordlist import Vocabulary, normalize_word, read_words, words_from_wordfreq

VERSION = "0.1.0"

logger = logging.getLogger(__name__)

SETTINGS = Settings()
VOCABULARY = Vocabulary()

_SESSIONS: Dict[str, Game] = {}
_LOCK = threading.Lock()
_LOAD_LOCK = threading.Lock()


def configure(settings: Settings) -> None:
    global SETTINGS
    SETTINGS = settings


def _load(settings: Settings) -> List[str]:
    if settings.words_path is None and settings.wordfreq_lang:
        return words_from_wordfreq(settings.wordfreq_lang)
    return read_words(settings.words_path)


def _start_loading() -> None:
    with _LOAD_LOCK:
        if not VOCABULARY.loading:
            settings = SETTINGS
            VOCABULARY.load_async(lambda: _load(settings))


def _vocabulary() -> List[str]:
    """Block until the word list is ready, starting the load if nobody has."""
    _start_loading()
    return VOCABULARY.wait(SETTINGS.load_timeout)


def _new_game(words: List[str]) -> Game:
    rng = random.Random(SETTINGS.seed)
    game = Game(words=words, rng=rng, budget=SETTINGS.sample_budget)
    game.new_game()
    return game


def _ensure_session(session: str) -> Game:
    words = _vocabulary()
    with _LOCK:
        if session not in _SESSIONS:
            _SESSIONS[session] = _new_game(words)
    return _SESSIONS[session]


def reset_sessions() -> None:
    with _LOCK:
        _SESSIONS.clear()


# ------------------------------------------------------------
# MCP server (FastMCP) and tools
# ------------------------------------------------------------

mcp = FastMCP("wordle-entropy")


@mcp.tool()
def reset_session(session: str = "default") -> dict:
    """Start a new game in the session and return the opening guess."""
    words = _vocabulary()
    with _LOCK:
        game = _SESSIONS[session] = _new_game(words)
    logger.debug("session %s reset: %d words", session, len(words))
    return {"session": session, "candidates": len(words), "suggestion": game.last.to_dict()}


@mcp.tool()
def apply_feedback(session: str, feedback: str, guess: str = "") -> dict:
    """Apply g/y/b feedback for the suggested guess (or for `guess` if another word was played)."""
    game = _ensure_session(session)
    played = guess.strip().lower() or None
    before = len(game.candidates())
    sel = game.submit(feedback, played)
    record = game.history[-1]
    return {
        "session": session,
        "applied": record.to_dict(),
        "candidates_before": before,
        "candidates_after": record.remaining,
        "narrowed": before - record.remaining,
        "next": sel.to_dict(),
        "status": game.status.value,
    }


@mcp.tool()
def suggest_guess(session: str = "default", top_k: int = 5) -> dict:
    """Current suggestion plus the top alternatives by expected information."""
    game = _ensure_session(session)
    cands = game.candidates()
    result = {
        "session": session,
        "attempts": len(game.history),
        "candidates": len(cands),
        "best": game.last.to_dict() if game.last else None,
        "alternatives": [],
        "status": game.status.value,
    }
    if game.active and game.history and len(cands) > 1:
        pool = evaluation_set(cands, game.budget, game.rng)
        result["alternatives"] = [s.to_dict() for s in rank(pool, cands, top_k)]
    if len(cands) <= 20:
        result["candidates_list"] = cands
    return result


@mcp.tool()
def explain(session: str, guess: str) -> dict:
    """Pattern distribution and expected information of `guess` against the remaining candidates."""
    game = _ensure_session(session)
    g = normalize_word(guess)
    if not g:
        raise InvalidWord(f"invalid guess {guess!r}: use 5 letters a-z")
    cands = game.candidates()
    dist = pattern_distribution(g, cands)
    total = sum(dist.values()) or 1
    return {
        "guess": g,
        "candidates": len(cands),
        "is_candidate": g in cands,
        "pattern_distribution": {k: v / total for k, v in sorted(dist.items(), key=lambda kv: -kv[1])},
        "expected_information_bits": round(entropy_bits(dist), 3),
        "expected_remaining": round(expected_remaining(dist), 2),
    }


@mcp.tool()
def state(session: str = "default") -> dict:
    """Current game state: constraints, history and candidate count."""
    game = _ensure_session(session)
    return {"session": session, **game.to_dict()}


@mcp.tool()
def whoami() -> dict:
    """Server and word-list information."""
    return {
        "version": VERSION,
        "pid": os.getpid(),
        "cwd": os.getcwd(),
        "vocabulary_ready": VOCABULARY.ready,
        "vocabulary_size": len(VOCABULARY.words) if VOCABULARY.ready and VOCABULARY.error is None else 0,
        "vocabulary_error": str(VOCABULARY.error) if VOCABULARY.error is not None else None,
        "settings": dataclasses.asdict(SETTINGS),
    }


# -------------------- local demo loop --------------------
def demo_cli() -> None:
    print("Wordle entropy demo | new | apply gybbb [word] | suggest | explain crane | state | quit")
    print(json.dumps(reset_session("demo")["suggestion"]))
    while True:
        try:
            cmd = input("> ").strip()
        except EOFError:
            break
        if cmd in ("quit", "exit"):
            break
        parts = cmd.split()
        try:
            if cmd == "new":
                print(json.dumps(reset_session("demo")["suggestion"]))
            elif parts[:1] == ["apply"] and len(parts) in (2, 3):
                res = apply_feedback("demo", parts[1], parts[2] if len(parts) == 3 else "")
                print(json.dumps(res["next"]))
            elif cmd == "suggest":
                print(json.dumps(suggest_guess("demo"), indent=2))
            elif parts[:1] == ["explain"] and len(parts) == 2:
                print(json.dumps(explain("demo", parts[1]), indent=2))
            elif cmd == "state":
                print(json.dumps(state("demo"), indent=2))
            else:
                print("Unknown command.")
        except SolverError as e:
            print(f"error: {e}")


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def main(argv: Optional[List[str]] = None) -> None:
    env = Settings.from_env()
    parser = argparse.ArgumentParser(description="MCP Wordle solver")
    parser.add_argument(
        "transport",
        nargs="?",
        default="stdio",
        choices=["stdio", "sse", "streamable-http"],
        help="MCP transport (default: stdio)",
    )
    parser.add_argument("--demo", action="store_true", help="run the local interactive loop")
    parser.add_argument("--words", default=env.words_path, help="word list file (default: bundled)")
    parser.add_argument("--wordfreq", default=env.wordfreq_lang, metavar="LANG", help="load words from wordfreq")
    parser.add_argument("--sample-budget", type=_positive_int, default=env.sample_budget)
    parser.add_argument("--seed", type=int, default=env.seed)
    parser.add_argument("--log-level", default=env.log_level)
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=args.log_level.upper(),
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    configure(dataclasses.replace(
        env,
        words_path=args.words,
        wordfreq_lang=args.wordfreq,
        sample_budget=args.sample_budget,
        seed=args.seed,
        log_level=args.log_level.upper(),
    ))
    # Start loading now; tools block on the gate until it is done.
    _start_loading()
    logger.info("pid=%d transport=%s", os.getpid(), "demo" if args.demo else args.transport)

    if args.demo:
        demo_cli()
    else:
        mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
