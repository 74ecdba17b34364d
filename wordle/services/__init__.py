"""
Services Package

Contains the game engine and the session-managing game service.
"""

from .catalog import WordCatalog, daily_index
from .evaluator import evaluate, is_winning
from .game_state import GameState
from .guess_buffer import GuessBuffer
from .keyboard import KeyboardHints
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'WordCatalog', 'daily_index',
    'evaluate', 'is_winning',
    'GameState', 'GuessBuffer', 'KeyboardHints',
    'GameService', 'get_game_service', 'initialize_game_service',
]
