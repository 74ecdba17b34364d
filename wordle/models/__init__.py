"""
Data Models Package

Contains all data models and error types used throughout the application.
"""

from .game import GameSnapshot, GameStatus, Guess, HintStatus, LetterResult, ScoredLetter
from .errors import (
    CatalogError,
    EmptyCatalogError,
    GameAlreadyOverError,
    GuessError,
    InvalidCharactersError,
    InvalidLengthError,
    NotInDictionaryError,
    WordLengthMismatchError,
    WordleError,
)

__all__ = [
    'GameSnapshot', 'GameStatus', 'Guess', 'HintStatus', 'LetterResult', 'ScoredLetter',
    'WordleError', 'CatalogError', 'EmptyCatalogError', 'WordLengthMismatchError',
    'GuessError', 'InvalidLengthError', 'InvalidCharactersError',
    'NotInDictionaryError', 'GameAlreadyOverError',
]
