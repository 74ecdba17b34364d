"""
Wordle Game Server - Main Entry Point

Initializes the game service and starts the Flask application.
"""

import os
from wordle import create_app
from wordle.config import config
from wordle.models.errors import CatalogError
from wordle.services.game_service import build_default_catalog, initialize_game_service
from wordle.utils.game_logger import game_logger


def main():
    config_class = config[os.getenv('FLASK_ENV', 'default')]

    try:
        catalog = build_default_catalog(config_class)
    except (FileNotFoundError, ValueError, CatalogError) as e:
        game_logger.logger.error(f"Failed to load word lists: {e}")
        raise SystemExit(1)

    game_service = initialize_game_service(catalog=catalog, max_attempts=config_class.MAX_ATTEMPTS)
    game_logger.logger.info(
        f"Game service ready with {len(game_service.catalog)} answers and "
        f"{len(game_service.catalog.acceptable_guesses)} acceptable guesses"
    )

    app = create_app(config_class)
    print(f"Wordle server listening on http://{config_class.HOST}:{config_class.PORT}")
    app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)


if __name__ == "__main__":
    main()
