"""
Game Configuration Constants Module

This module defines the game rule constants and loads the bundled word lists.
The word lists are read once at import and shared read-only by every round.
"""

import json
import os
import string
from collections import Counter
from typing import Final, List

WORD_LENGTH: Final[int] = 5
"""Number of letters in every secret and guess."""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = string.ascii_uppercase

CONFIG_DIR: Final[str] = os.path.dirname(os.path.abspath(__file__))
ANSWERS_FILE: Final[str] = os.path.join(CONFIG_DIR, 'answers.json')
GUESSES_FILE: Final[str] = os.path.join(CONFIG_DIR, 'guesses.json')


def load_word_list(path: str, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Load a word list from a JSON array file or a newline separated text file.

    Returns:
        List[str]: List of uppercase words in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the file is malformed, empty or contains invalid words
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {path}")

    if path.endswith('.json'):
        try:
            word_list = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {os.path.basename(path)}: {e}")
        if not isinstance(word_list, list):
            raise ValueError("JSON file must contain an array of words")
    else:
        word_list = [line.strip() for line in content.splitlines() if line.strip()]

    if not word_list:
        raise ValueError("Word list cannot be empty")

    uppercase_words = [str(word).strip().upper() for word in word_list]
    validate_word_list_integrity(uppercase_words, word_length)
    return uppercase_words


def validate_word_list_integrity(words: List[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word list.

    Checks length, alphabetic characters, uppercase formatting and uniqueness.

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str]) -> dict:
    """
    Summarizes a word list for the health endpoint.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency, most_common_letters
    """
    if not words:
        return {"error": "Word list is empty"}

    letter_frequency = Counter(char for word in words for char in word)
    total_vowels = sum(letter_frequency[vowel] for vowel in "AEIOU")

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": dict(letter_frequency),
        "most_common_letters": letter_frequency.most_common(5)
    }


# Bundled dictionary loaded from the JSON files next to this module
ANSWER_LIST: Final[List[str]] = load_word_list(ANSWERS_FILE)
GUESS_LIST: Final[List[str]] = load_word_list(GUESSES_FILE)

