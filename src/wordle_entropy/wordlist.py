"""Word-list loading, normalization and the readiness gate.

Sources: the bundled ``words.txt``, any text file with one word (optionally
followed by a frequency) per line, or the ``wordfreq`` corpus.
"""
from __future__ import annotations
import argparse
import logging
import re
import threading
from importlib.resources import files
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from unidecode import unidecode
from wordfreq import top_n_list

from .errors import UnloadedVocabulary
from .feedback import WORD_LENGTH

logger = logging.getLogger(__name__)

_NON_ALPHA = re.compile(r"[^a-z]")


def normalize_word(raw: str) -> str:
    """Lowercase, strip accents, keep a-z only; "" unless exactly 5 letters remain."""
    w = _NON_ALPHA.sub("", unidecode(raw or "").strip().lower())
    return w if len(w) == WORD_LENGTH else ""


def normalize_words(raw: Iterable[str]) -> List[str]:
    out: List[str] = []
    seen = set()
    for line in raw:
        token = line.split(maxsplit=1)[0] if line.strip() else ""
        w = normalize_word(token)
        if w and w not in seen:
            seen.add(w)
            out.append(w)
    return out


def read_words(path: Optional[str] = None) -> List[str]:
    """Words from ``path``, or from the bundled list when ``path`` is None."""
    if path is None:
        txt = files("wordle_entropy").joinpath("words.txt").read_text(encoding="utf-8")
        source = "bundled words.txt"
    else:
        src = Path(path)
        if not src.exists():
            raise FileNotFoundError(f"Word list not found: {src}")
        txt = src.read_text(encoding="utf-8")
        source = str(src)

    words = normalize_words(txt.splitlines())
    if not words:
        raise ValueError(f"No {WORD_LENGTH}-letter words found in {source}")
    logger.info("loaded %d words from %s", len(words), source)
    return words


def words_from_wordfreq(lang: str = "en", n: int = 50000) -> List[str]:
    """Five-letter words among the ``n`` most frequent ``wordfreq`` words of ``lang``."""
    words = normalize_words(top_n_list(lang, n))
    if not words:
        raise ValueError(f"No {WORD_LENGTH}-letter words in wordfreq list {lang!r}")
    logger.info("loaded %d words from wordfreq (%s)", len(words), lang)
    return words


class Vocabulary:
    """
    The process-wide word list, filled once.

    ``words`` and ``wait`` refuse to hand out a list that has not finished
    loading, so no guess is ever computed against a partial vocabulary.
    """

    def __init__(self) -> None:
        self._words: List[str] = []
        self._ready = threading.Event()
        self._error: Optional[BaseException] = None
        self.loading = False

    @property
    def ready(self) -> bool:
        return self._ready.is_set()

    @property
    def error(self) -> Optional[BaseException]:
        return self._error

    @property
    def words(self) -> List[str]:
        if not self._ready.is_set():
            raise UnloadedVocabulary("word list has not finished loading")
        if self._error is not None:
            raise UnloadedVocabulary(f"word list failed to load: {self._error}")
        return self._words

    def load(self, words: Iterable[str]) -> List[str]:
        self.loading = True
        self._words = normalize_words(words)
        self._ready.set()
        return self._words

    def load_async(self, loader: Callable[[], List[str]]) -> threading.Thread:
        """Run ``loader`` on a background thread and publish its result."""
        self.loading = True

        def run() -> None:
            try:
                self._words = list(loader())
            except Exception as e:
                logger.error("word list failed to load: %s", e)
                self._error = e
            self._ready.set()

        t = threading.Thread(target=run, name="wordlist-loader", daemon=True)
        t.start()
        return t

    def wait(self, timeout: Optional[float] = None) -> List[str]:
        if not self._ready.wait(timeout):
            raise UnloadedVocabulary(f"word list not loaded after {timeout}s")
        return self.words


def main(argv: Optional[List[str]] = None) -> None:
    """Write a deduplicated 5-letter list, one word per line."""
    parser = argparse.ArgumentParser(description="Build a 5-letter word list")
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--from-file", help='text file of "word [frequency]" lines')
    src.add_argument("--wordfreq", metavar="LANG", help="wordfreq language code, e.g. en or es")
    parser.add_argument("--top", type=int, default=50000, help="wordfreq words to scan")
    parser.add_argument("--out", required=True, help="output path")
    args = parser.parse_args(argv)

    words = read_words(args.from_file) if args.from_file else words_from_wordfreq(args.wordfreq, args.top)
    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text("".join(w + "\n" for w in words), encoding="utf-8")
    print(f"Words written ({WORD_LENGTH} letters): {len(words)}")
    print(f"Saved to: {out}")


if __name__ == "__main__":
    main()
