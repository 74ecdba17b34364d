"""
Guess Evaluator

Implements the authentic Wordle letter evaluation algorithm.
"""

from collections import Counter
from typing import List

from ..models.errors import InvalidLengthError
from ..models.game import Guess, LetterResult, ScoredLetter


def evaluate(secret: str, guess: str) -> Guess:
    """
    Scores ``guess`` against ``secret``.

    Exact matches claim letters from the secret first; the remaining letters
    are then handed out left to right as PRESENT until the secret runs out of
    that letter. A guess repeating a letter more often than the secret holds
    it therefore gets the surplus copies marked ABSENT.

    Raises:
        InvalidLengthError: If the two words differ in length
    """
    secret = secret.upper()
    guess = guess.upper()
    if len(secret) != len(guess):
        raise InvalidLengthError(
            f"Guess must be exactly {len(secret)} letters, got {len(guess)}"
        )

    results: List[LetterResult] = [LetterResult.ABSENT] * len(guess)
    remaining = Counter(secret)

    # First pass: exact position matches
    for i, (guessed, expected) in enumerate(zip(guess, secret)):
        if guessed == expected:
            results[i] = LetterResult.CORRECT
            remaining[guessed] -= 1

    # Second pass: misplaced letters, limited by what the secret has left
    for i, guessed in enumerate(guess):
        if results[i] is LetterResult.CORRECT:
            continue
        if remaining[guessed] > 0:
            results[i] = LetterResult.PRESENT
            remaining[guessed] -= 1

    return Guess(tuple(ScoredLetter(letter, result) for letter, result in zip(guess, results)))


def is_winning(guess: Guess) -> bool:
    return guess.is_correct
