"""
Game Service

Manages single-player Wordle rounds keyed by game id.
"""

import random
import uuid
from typing import Dict, Optional, Tuple

from ..config.app_config import Config
from ..config.game_settings import ANSWER_LIST, GUESS_LIST
from ..models.errors import GuessError
from ..models.game import GameSnapshot, Guess
from ..utils.game_logger import game_logger
from .catalog import WordCatalog
from .game_state import GameState


def build_default_catalog(config_class=Config) -> WordCatalog:
    """Catalog from the configured word list files, or the bundled lists."""
    if config_class.ANSWERS_PATH:
        return WordCatalog.from_files(
            config_class.ANSWERS_PATH, config_class.GUESSES_PATH, config_class.WORD_LENGTH
        )
    return WordCatalog(ANSWER_LIST, GUESS_LIST, config_class.WORD_LENGTH)


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Secret selection from the shared catalog
    - Guess validation and evaluation through each round's GameState
    - Game state snapshots that hide the answer until the round ends
    """

    def __init__(self, catalog: Optional[WordCatalog] = None, max_attempts: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        self.catalog = catalog or build_default_catalog()
        self.max_attempts = max_attempts or Config.MAX_ATTEMPTS
        self.rng = rng
        self.games: Dict[str, GameState] = {}

    @property
    def active_games(self) -> int:
        return sum(1 for game in self.games.values() if not game.is_over)

    def create_new_game(self, seed: Optional[int] = None) -> str:
        """
        Creates a new game session.

        Args:
            seed: Puzzle index for a reproducible secret; random when omitted

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        secret = self.catalog.pick_secret(seed=seed, rng=self.rng)
        self.games[game_id] = GameState(secret, self.catalog, self.max_attempts)

        game_logger.log_game_event(
            game_id, 'game_created', seeded=seed is not None, max_rounds=self.max_attempts
        )
        return game_id

    def get_game(self, game_id: str) -> Optional[GameState]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameSnapshot]:
        """
        Returns the current state of a session (without revealing the answer).

        Returns:
            GameSnapshot or None if game not found
        """
        game = self.games.get(game_id)
        if game is None:
            return None
        return game.snapshot(game_id)

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for a specific game session.

        Returns:
            Tuple of (is_valid, error_message)
        """
        game = self.games.get(game_id)
        if game is None:
            return False, "Game not found"

        if not isinstance(guess, str):
            return False, "Guess must be a valid string"

        error = game.validate_guess(guess)
        if error is not None:
            return False, error.message

        return True, ""

    def make_guess(self, game_id: str, guess: str) -> Tuple[GameSnapshot, Guess]:
        """
        Processes a guess and updates game state.

        Returns:
            The updated snapshot and the scored guess

        Raises:
            KeyError: If the game does not exist
            GuessError: If the guess is rejected
        """
        game = self.games.get(game_id)
        if game is None:
            raise KeyError(game_id)
        if not isinstance(guess, str):
            raise GuessError("Guess must be a valid string")

        scored = game.submit_guess(guess)

        if game.is_over:
            game_logger.log_game_event(
                game_id, 'game_won' if game.won else 'game_lost',
                rounds_used=game.turn, target_word=game.answer
            )

        return game.snapshot(game_id), scored

    def delete_game(self, game_id: str) -> bool:
        """Discards a session; returns False if it did not exist."""
        return self.games.pop(game_id, None) is not None


# Global game service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(catalog: Optional[WordCatalog] = None,
                            max_attempts: Optional[int] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(catalog=catalog, max_attempts=max_attempts)
    return _game_service
