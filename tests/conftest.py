import os
import tempfile

# Keep test logs out of the working directory; read when wordle.config is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle-logs-'))

import pytest

from wordle import create_app
from wordle.config import TestingConfig
from wordle.services import GameState, WordCatalog, initialize_game_service

ANSWERS = ["SPEED", "ROBOT", "CRANE", "LEVEL", "ABBEY"]
GUESSES = ["ERASE", "EERIE", "BELLE", "KEBAB", "OTTER", "TRAIN", "HOUSE", "PIANO", "MOUSE", "BRAIN"]


@pytest.fixture
def catalog():
    return WordCatalog(ANSWERS, GUESSES)


@pytest.fixture
def game(catalog):
    return GameState("ROBOT", catalog, max_attempts=6)


@pytest.fixture
def game_service(catalog):
    return initialize_game_service(catalog=catalog, max_attempts=6)


@pytest.fixture
def client(game_service):
    app = create_app(TestingConfig)
    with app.test_client() as client:
        yield client
