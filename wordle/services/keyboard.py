"""
Keyboard Hints

Best status seen so far for every letter of the alphabet, for colouring the
on-screen keyboard. Hints are derived from the guess history and can always be
rebuilt by replaying it.
"""

from typing import Dict, Iterable

from ..config.game_settings import ALPHABET
from ..models.game import Guess, HintStatus


class KeyboardHints:

    def __init__(self):
        self._status: Dict[str, HintStatus] = {letter: HintStatus.UNKNOWN for letter in ALPHABET}

    @classmethod
    def from_guesses(cls, guesses: Iterable[Guess]) -> "KeyboardHints":
        hints = cls()
        for guess in guesses:
            hints.record(guess)
        return hints

    def record(self, guess: Guess) -> None:
        """Raises each guessed letter's hint; a hint is never downgraded."""
        for scored in guess:
            observed = HintStatus.from_result(scored.result)
            current = self._status.get(scored.letter, HintStatus.UNKNOWN)
            if observed > current:
                self._status[scored.letter] = observed

    def status_of(self, letter: str) -> HintStatus:
        return self._status.get(letter.upper(), HintStatus.UNKNOWN)

    def as_dict(self) -> Dict[str, str]:
        return {letter: status.value for letter, status in self._status.items()}

    def __eq__(self, other):
        if not isinstance(other, KeyboardHints):
            return NotImplemented
        return self._status == other._status

    def __repr__(self):
        known = {letter: status.value for letter, status in self._status.items()
                 if status is not HintStatus.UNKNOWN}
        return f"KeyboardHints({known})"
