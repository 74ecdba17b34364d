"""
Word Catalog

Immutable pair of word sets loaded once and shared by every round:
the answers a secret may be drawn from and the words accepted as guesses.
"""

import random
from datetime import date
from typing import FrozenSet, Iterable, Optional, Tuple

from ..config.game_settings import WORD_LENGTH, load_word_list
from ..models.errors import EmptyCatalogError, WordLengthMismatchError

# First day of the daily puzzle; day 0 of the deterministic word sequence
FIRST_DAILY_PUZZLE = date(2021, 6, 19)


def daily_index(day: Optional[date] = None) -> int:
    """Number of days elapsed since the first daily puzzle."""
    day = day or date.today()
    return (day - FIRST_DAILY_PUZZLE).days


class WordCatalog:
    """
    Read-only dictionary for a game.

    Every answer is also an acceptable guess, so the guess set is the union of
    both supplied lists. Answers keep their supply order so that seeded
    selection is reproducible.
    """

    def __init__(self, answers: Iterable[str], guesses: Iterable[str] = (),
                 word_length: int = WORD_LENGTH):
        if word_length < 1:
            raise ValueError("word_length must be positive")
        self._word_length = word_length

        normalized_answers = [self._normalize(word) for word in answers]
        if not normalized_answers:
            raise EmptyCatalogError("Word catalog must contain at least one answer")

        # dict.fromkeys de-duplicates while keeping supply order
        self._answers: Tuple[str, ...] = tuple(dict.fromkeys(normalized_answers))
        self._guesses: FrozenSet[str] = frozenset(
            self._normalize(word) for word in guesses
        ) | frozenset(self._answers)

    @classmethod
    def from_files(cls, answers_path: str, guesses_path: Optional[str] = None,
                   word_length: int = WORD_LENGTH) -> "WordCatalog":
        answers = load_word_list(answers_path, word_length)
        guesses = load_word_list(guesses_path, word_length) if guesses_path else ()
        return cls(answers, guesses, word_length)

    def _normalize(self, word: str) -> str:
        normalized = word.strip().upper()
        if len(normalized) != self._word_length:
            raise WordLengthMismatchError(
                f"Word '{normalized}' is not {self._word_length} letters long"
            )
        if not (normalized.isascii() and normalized.isalpha()):
            raise WordLengthMismatchError(
                f"Word '{normalized}' contains non-alphabetic characters"
            )
        return normalized

    @property
    def word_length(self) -> int:
        return self._word_length

    @property
    def answers(self) -> Tuple[str, ...]:
        return self._answers

    @property
    def acceptable_guesses(self) -> FrozenSet[str]:
        return self._guesses

    def __len__(self) -> int:
        return len(self._answers)

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and self.is_acceptable_guess(word)

    def is_acceptable_guess(self, word: str) -> bool:
        return word.strip().upper() in self._guesses

    def pick_secret(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> str:
        """
        Chooses a secret from the answer set.

        Args:
            seed: Day/puzzle index. The same seed always yields the same word.
            rng: Random source used when no seed is given

        Returns:
            str: The selected secret in uppercase
        """
        if not self._answers:
            raise EmptyCatalogError("Word catalog must contain at least one answer")

        if seed is not None:
            return self._answers[seed % len(self._answers)]

        return (rng or random).choice(self._answers)

    def pick_daily_secret(self, day: Optional[date] = None) -> str:
        return self.pick_secret(seed=daily_index(day))
