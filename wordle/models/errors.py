"""
Game Errors

All conditions the engine reports to its caller. Each error carries a stable
``code`` so frontends can decide how to present it (e.g. shake the row on
``not_in_dictionary``).
"""


class WordleError(Exception):
    """Base class for every recoverable game error."""
    code = "wordle_error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.__class__.__doc__)
        self.message = str(self.args[0])

    def to_dict(self) -> dict:
        return {'error': self.message, 'error_code': self.code}


class CatalogError(WordleError):
    """Word catalog could not be built."""
    code = "catalog_error"


class EmptyCatalogError(CatalogError):
    """Word catalog has no answer words."""
    code = "empty_catalog"


class WordLengthMismatchError(CatalogError):
    """Word does not match the configured word length."""
    code = "length_mismatch"


class GuessError(WordleError):
    """Guess was rejected."""
    code = "invalid_guess"


class InvalidLengthError(GuessError):
    """Guess has the wrong number of letters."""
    code = "invalid_length"


class InvalidCharactersError(GuessError):
    """Guess must contain only letters A-Z."""
    code = "invalid_characters"


class NotInDictionaryError(GuessError):
    """Word not in word list."""
    code = "not_in_dictionary"


class GameAlreadyOverError(GuessError):
    """Game is already over."""
    code = "game_already_over"
