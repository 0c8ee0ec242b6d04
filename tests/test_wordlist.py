import threading

import pytest

from wordle_entropy import wordlist
from wordle_entropy.errors import UnloadedVocabulary
from wordle_entropy.wordlist import Vocabulary, normalize_word, read_words, words_from_wordfreq


def test_normalize_word():
    assert normalize_word("Árbol") == "arbol"
    assert normalize_word("  ñandú ") == "nandu"
    assert normalize_word("abc") == ""
    assert normalize_word("cranes") == ""
    assert normalize_word("") == ""


def test_bundled_list():
    words = read_words()
    assert "tares" in words
    assert all(len(w) == 5 and w.isalpha() and w.islower() for w in words)
    assert len(words) == len(set(words))


def test_read_frequency_file(tmp_path):
    path = tmp_path / "freq.txt"
    path.write_text("Crane 100\nslate\n\ncrane 3\nabc\nniño5\n", encoding="utf-8")
    assert read_words(str(path)) == ["crane", "slate"]


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_words(str(tmp_path / "nope.txt"))


def test_read_file_without_words(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("cat\ndog\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_words(str(path))


def test_wordfreq_source(monkeypatch):
    monkeypatch.setattr(wordlist, "top_n_list", lambda lang, n: ["the", "house", "Árbol", "house"])
    assert words_from_wordfreq("es", 10) == ["house", "arbol"]


def test_vocabulary_gate_before_loading():
    vocab = Vocabulary()
    assert not vocab.ready
    with pytest.raises(UnloadedVocabulary):
        vocab.words
    with pytest.raises(UnloadedVocabulary):
        vocab.wait(timeout=0.01)


def test_vocabulary_load():
    vocab = Vocabulary()
    assert vocab.load(["Crane", "slate", "crane"]) == ["crane", "slate"]
    assert vocab.ready
    assert vocab.wait(0) == ["crane", "slate"]


def test_vocabulary_load_async_waits_for_loader():
    release = threading.Event()
    vocab = Vocabulary()

    def loader():
        release.wait(5)
        return ["crane", "slate"]

    t = vocab.load_async(loader)
    assert vocab.loading
    with pytest.raises(UnloadedVocabulary):
        vocab.words
    release.set()
    assert vocab.wait(5) == ["crane", "slate"]
    t.join(5)


def test_vocabulary_load_failure_surfaces():
    def loader():
        raise FileNotFoundError("gone")

    vocab = Vocabulary()
    vocab.load_async(loader).join(5)
    with pytest.raises(UnloadedVocabulary, match="gone"):
        vocab.wait(1)


def test_build_words_cli(tmp_path, capsys):
    src = tmp_path / "es_full.txt"
    src.write_text("perro 10\ngatos 8\nárbol 5\nsol 3\n", encoding="utf-8")
    out = tmp_path / "out" / "words.txt"
    wordlist.main(["--from-file", str(src), "--out", str(out)])
    assert out.read_text(encoding="utf-8").split() == ["perro", "gatos", "arbol"]
    assert "3" in capsys.readouterr().out
