"""
Testing round state transitions and guess validation.
"""

import pytest

from wordle.models import (
    GameAlreadyOverError,
    GameStatus,
    InvalidCharactersError,
    InvalidLengthError,
    LetterResult,
    NotInDictionaryError,
    WordLengthMismatchError,
)
from wordle.services import GameState, KeyboardHints

LOSING_GUESSES = ["ERASE", "EERIE", "BELLE", "KEBAB", "OTTER", "TRAIN"]


def test_new_game_starts_in_progress(game):
    assert game.status is GameStatus.IN_PROGRESS
    assert game.guesses == ()
    assert game.turn == 0
    assert game.remaining_attempts == 6
    assert game.answer is None


def test_winning_guess(game):
    guess = game.submit_guess("robot")

    assert guess.results == [LetterResult.CORRECT] * 5
    assert game.status is GameStatus.WON
    assert game.won and game.is_over
    assert game.answer == "ROBOT"


def test_losing_after_max_attempts(game):
    for i, word in enumerate(LOSING_GUESSES):
        assert game.status is GameStatus.IN_PROGRESS
        game.submit_guess(word)
        assert game.turn == i + 1

    assert game.status is GameStatus.LOST
    assert game.remaining_attempts == 0
    assert game.answer == "ROBOT"

    with pytest.raises(GameAlreadyOverError):
        game.submit_guess("ROBOT")
    assert len(game.guesses) == 6


def test_winning_on_last_attempt(game):
    for word in LOSING_GUESSES[:5]:
        game.submit_guess(word)

    game.submit_guess("ROBOT")

    assert game.status is GameStatus.WON


@pytest.mark.parametrize("raw, error", [
    ("ROBO", InvalidLengthError),
    ("ROBOTS", InvalidLengthError),
    ("", InvalidLengthError),
    ("ZZZZZ", NotInDictionaryError),
    ("R0B0T", InvalidCharactersError),
    ("Öster", InvalidCharactersError),
])
def test_rejected_guesses_do_not_use_an_attempt(game, raw, error):
    assert isinstance(game.validate_guess(raw), error)

    with pytest.raises(error):
        game.submit_guess(raw)

    assert game.turn == 0
    assert game.status is GameStatus.IN_PROGRESS


def test_finished_game_rejects_everything(game):
    game.submit_guess("ROBOT")

    for raw in ["ROBOT", "ZZZZZ", "AB", "CRANE"]:
        assert isinstance(game.validate_guess(raw), GameAlreadyOverError)
        with pytest.raises(GameAlreadyOverError):
            game.submit_guess(raw)

    assert [guess.word for guess in game.guesses] == ["ROBOT"]


def test_guess_input_is_trimmed_and_uppercased(game):
    guess = game.submit_guess("  otter ")

    assert guess.word == "OTTER"


def test_guesses_is_a_read_only_copy(game):
    game.submit_guess("OTTER")
    history = game.guesses

    assert isinstance(history, tuple)
    game.submit_guess("TRAIN")
    assert len(history) == 1
    assert [guess.word for guess in game.guesses] == ["OTTER", "TRAIN"]


def test_keyboard_matches_replayed_history(game):
    for word in ["OTTER", "TRAIN", "BELLE"]:
        game.submit_guess(word)

    assert game.keyboard == KeyboardHints.from_guesses(game.guesses)


def test_invalid_construction(catalog):
    with pytest.raises(WordLengthMismatchError):
        GameState("ROBOTS", catalog)
    with pytest.raises(ValueError):
        GameState("ROBOT", catalog, max_attempts=0)


def test_max_attempts_is_fixed(game):
    with pytest.raises(AttributeError):
        game.max_attempts = 10


def test_snapshot_hides_answer_until_over(game):
    game.submit_guess("OTTER")
    snapshot = game.snapshot("game-1")

    assert snapshot.game_id == "game-1"
    assert snapshot.current_round == 1
    assert snapshot.status == "in_progress"
    assert snapshot.answer is None
    assert snapshot.guesses == ["OTTER"]
    assert snapshot.guess_results[0][0] == ("O", "present")
    assert snapshot.letter_status["R"] == "present"
    assert snapshot.letter_status["Z"] == "unknown"

    game.submit_guess("ROBOT")
    snapshot = game.snapshot("game-1")
    assert snapshot.won and snapshot.game_over
    assert snapshot.answer == "ROBOT"
