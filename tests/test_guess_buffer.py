import pytest

from wordle.models import InvalidLengthError
from wordle.services import GuessBuffer


def test_typing_a_word():
    buffer = GuessBuffer()
    for char in "crane":
        assert buffer.add_letter(char)

    assert buffer.text == "CRANE"
    assert buffer.is_complete
    assert not buffer.add_letter("s")
    assert buffer.take() == "CRANE"
    assert len(buffer) == 0


def test_non_letters_are_ignored():
    buffer = GuessBuffer()

    assert not buffer.add_letter("1")
    assert not buffer.add_letter("ab")
    assert not buffer.add_letter("é")
    assert buffer.text == ""


def test_backspace():
    buffer = GuessBuffer()
    assert not buffer.backspace()

    buffer.add_letter("a")
    buffer.add_letter("b")
    assert buffer.backspace()
    assert buffer.text == "A"


def test_take_incomplete_word():
    buffer = GuessBuffer(word_length=4)
    buffer.add_letter("a")

    with pytest.raises(InvalidLengthError):
        buffer.take()
    assert buffer.text == "A"
