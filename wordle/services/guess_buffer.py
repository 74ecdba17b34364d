"""
Guess Buffer

The row a player is currently typing, before it is submitted as a guess.
"""

from ..config.game_settings import WORD_LENGTH
from ..models.errors import InvalidLengthError


class GuessBuffer:

    def __init__(self, word_length: int = WORD_LENGTH):
        self.word_length = word_length
        self._letters = []

    @property
    def text(self) -> str:
        return ''.join(self._letters)

    @property
    def is_complete(self) -> bool:
        return len(self._letters) == self.word_length

    def __len__(self) -> int:
        return len(self._letters)

    def add_letter(self, char: str) -> bool:
        """Appends a letter; returns False when the row is full or the key is not a letter."""
        if len(char) != 1 or not (char.isascii() and char.isalpha()):
            return False
        if self.is_complete:
            return False
        self._letters.append(char.upper())
        return True

    def backspace(self) -> bool:
        if not self._letters:
            return False
        self._letters.pop()
        return True

    def clear(self) -> None:
        self._letters.clear()

    def take(self) -> str:
        """Returns the finished word and empties the row."""
        if not self.is_complete:
            raise InvalidLengthError(f"Guess must be exactly {self.word_length} letters")
        word = self.text
        self.clear()
        return word
