"""
Game State

Tracks a single round: the secret, the append-only guess history and the
round's outcome.
"""

from typing import List, Optional, Tuple

from ..config.game_settings import MAX_ATTEMPTS
from ..models.errors import (
    GameAlreadyOverError,
    GuessError,
    InvalidCharactersError,
    InvalidLengthError,
    NotInDictionaryError,
    WordLengthMismatchError,
)
from ..models.game import GameSnapshot, GameStatus, Guess
from .catalog import WordCatalog
from .evaluator import evaluate, is_winning
from .keyboard import KeyboardHints


class GameState:
    """
    One round of Wordle.

    The only mutation is ``submit_guess``. Once the round is WON or LOST every
    further submission is rejected and the history is left untouched.
    """

    def __init__(self, secret: str, catalog: WordCatalog, max_attempts: int = MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        secret = secret.strip().upper()
        if len(secret) != catalog.word_length or not (secret.isascii() and secret.isalpha()):
            raise WordLengthMismatchError(
                f"Secret must be {catalog.word_length} letters long"
            )

        self._secret = secret
        self._catalog = catalog
        self._max_attempts = max_attempts
        self._guesses: List[Guess] = []
        self._keyboard = KeyboardHints()
        self._status = GameStatus.IN_PROGRESS

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def word_length(self) -> int:
        return len(self._secret)

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status is not GameStatus.IN_PROGRESS

    @property
    def won(self) -> bool:
        return self._status is GameStatus.WON

    @property
    def turn(self) -> int:
        return len(self._guesses)

    @property
    def remaining_attempts(self) -> int:
        return self._max_attempts - len(self._guesses)

    @property
    def guesses(self) -> Tuple[Guess, ...]:
        return tuple(self._guesses)

    @property
    def keyboard(self) -> KeyboardHints:
        return self._keyboard

    @property
    def answer(self) -> Optional[str]:
        """The secret, revealed only once the round has ended."""
        return self._secret if self.is_over else None

    def validate_guess(self, raw: str) -> Optional[GuessError]:
        """
        Classifies a raw guess without submitting it.

        Returns:
            The error the guess would be rejected with, or None if it is valid
        """
        if self.is_over:
            return GameAlreadyOverError()

        guess = raw.strip().upper() if isinstance(raw, str) else ''

        if guess and not (guess.isascii() and guess.isalpha()):
            return InvalidCharactersError()

        if len(guess) != self.word_length:
            return InvalidLengthError(f"Guess must be exactly {self.word_length} letters")

        if not self._catalog.is_acceptable_guess(guess):
            return NotInDictionaryError(f"'{guess}' is not in the word list")

        return None

    def submit_guess(self, raw: str) -> Guess:
        """
        Validates, scores and records a guess.

        Raises:
            GuessError: If the guess is rejected; the state is unchanged
        """
        error = self.validate_guess(raw)
        if error is not None:
            raise error

        guess = evaluate(self._secret, raw.strip().upper())
        self._guesses.append(guess)
        self._keyboard.record(guess)

        if is_winning(guess):
            self._status = GameStatus.WON
        elif len(self._guesses) >= self._max_attempts:
            self._status = GameStatus.LOST

        return guess

    def snapshot(self, game_id: str) -> GameSnapshot:
        return GameSnapshot(
            game_id=game_id,
            current_round=self.turn,
            max_rounds=self._max_attempts,
            word_length=self.word_length,
            status=self._status.value,
            game_over=self.is_over,
            won=self.won,
            guesses=[guess.word for guess in self._guesses],
            guess_results=[guess.to_pairs() for guess in self._guesses],
            letter_status=self._keyboard.as_dict(),
            answer=self.answer,
        )
