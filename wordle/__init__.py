"""
Wordle Game Application Package

The game engine (word catalog, evaluator, game state, keyboard hints) lives in
``wordle.services``; this module builds the Flask app that serves it as a JSON
API for a web frontend.
"""

from flask import Flask, jsonify, request
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    # Unexpected failures are logged and reported as JSON
    from .utils.game_logger import game_logger

    @app.errorhandler(500)
    def internal_error(error):
        original = getattr(error, 'original_exception', None) or error
        game_logger.log_error(request, original, request.endpoint or 'unknown')
        return jsonify({'success': False, 'error': 'Internal server error'}), 500

    return app
