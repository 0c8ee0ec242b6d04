import pytest

from wordle_entropy.errors import InvalidFeedbackFormat
from wordle_entropy.feedback import Mark, as_pattern, is_solved, parse_feedback, pattern_str, simulate


def run(guess, answer):
    return pattern_str(simulate(guess, answer))


def test_tares_against_slate():
    # t, a, e and s all occur in slate, none in place
    assert run("tares", "slate") == "yybyy"


def test_speed_against_erase_credits_both_es():
    assert run("speed", "erase") == "ybyyb"


def test_repeated_guess_letter_marked_once():
    assert run("eerie", "those") == "bbbbg"
    assert run("lolly", "hello") == "byggb"


@pytest.mark.parametrize("guess,answer", [
    ("crane", "slate"), ("plumb", "crane"), ("least", "stale"), ("night", "thing"),
])
def test_distinct_letters_follow_position_and_membership(guess, answer):
    pat = simulate(guess, answer)
    for i, (g, m) in enumerate(zip(guess, pat)):
        if g == answer[i]:
            assert m is Mark.EXACT
        elif g in answer:
            assert m is Mark.PRESENT
        else:
            assert m is Mark.ABSENT


@pytest.mark.parametrize("guess,answer", [
    ("speed", "erase"), ("geese", "those"), ("sassy", "basis"), ("llama", "label"),
])
def test_never_over_credits_a_letter(guess, answer):
    pat = simulate(guess, answer)
    for ch in set(guess):
        hits = sum(1 for g, m in zip(guess, pat) if g == ch and m is not Mark.ABSENT)
        assert hits <= answer.count(ch)


def test_same_word_is_solved():
    assert is_solved(simulate("crane", "crane"))
    assert not is_solved(simulate("crane", "crate"))


def test_length_mismatch():
    with pytest.raises(ValueError):
        simulate("crane", "cranes")


def test_parse_alphabets():
    expected = (Mark.EXACT, Mark.PRESENT, Mark.ABSENT, Mark.ABSENT, Mark.EXACT)
    assert parse_feedback("gybbg") == expected
    assert parse_feedback(" GYKKG ") == expected
    assert parse_feedback("🟩🟨⬛⬜🟩") == expected


@pytest.mark.parametrize("bad", ["", "gyb", "gybbbb", "gybbx", None])
def test_parse_rejects(bad):
    with pytest.raises(InvalidFeedbackFormat):
        parse_feedback(bad)


def test_invalid_feedback_is_value_error():
    with pytest.raises(ValueError):
        parse_feedback("12345")


def test_as_pattern_accepts_marks_and_codes():
    expected = parse_feedback("gybbg")
    assert as_pattern("gybbg") == expected
    assert as_pattern(["g", "y", "b", "b", "g"]) == expected
    assert as_pattern(expected) == expected


@pytest.mark.parametrize("bad", [["g", "y", "b", "b"], ["g", "y", "b", "b", "k"], (1, 2, 3, 4, 5), 7])
def test_as_pattern_rejects(bad):
    with pytest.raises(InvalidFeedbackFormat):
        as_pattern(bad)
