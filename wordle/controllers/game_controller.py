"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from typing import Optional
from flask import Blueprint, request, jsonify

from ..config.game_settings import get_word_statistics
from ..models.errors import GuessError
from ..services.catalog import daily_index
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_seed

game_bp = Blueprint('game', __name__)

JSON_OBJECT_REQUIRED = 'Request body must be a JSON object'


def _game_not_found(action: str, game_id: str):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _bad_request(action: str, message: str, game_id: Optional[str] = None):
    error_response = {
        'success': False,
        'error': message
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 400


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return _bad_request('new_game', JSON_OBJECT_REQUIRED)

    try:
        seed = daily_index() if data.get('daily') else parse_seed(data.get('seed'))
    except ValueError as e:
        return _bad_request('new_game', str(e))

    game_logger.log_user_action(request, 'new_game', seed=seed, daily=bool(data.get('daily')))

    game_id = game_service.create_new_game(seed=seed)
    state = game_service.get_game_state(game_id)

    response_data = {
        'success': True,
        'game_id': game_id,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'new_game', True, response_data, game_id,
        word_length=state.word_length, max_rounds=state.max_rounds
    )

    return jsonify(response_data)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_service, game_id):
    """Get current game state."""
    game_logger.log_user_action(request, 'get_state', game_id)

    state = game_service.get_game_state(game_id)
    if state is None:
        return _game_not_found('get_state', game_id)

    response_data = {
        'success': True,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'get_state', True, response_data, game_id,
        current_round=state.current_round, game_over=state.game_over
    )

    return jsonify(response_data)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game_service
def make_guess(game_service, game_id):
    """Submit a guess for validation and evaluation."""
    data = request.get_json(silent=True)
    if data is not None and not isinstance(data, dict):
        return _bad_request('submit_guess', JSON_OBJECT_REQUIRED, game_id)
    if not data or 'guess' not in data:
        return _bad_request('submit_guess', 'Guess is required', game_id)

    guess = data['guess']

    game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

    if game_service.get_game(game_id) is None:
        return _game_not_found('submit_guess', game_id)

    try:
        state, scored = game_service.make_guess(game_id, guess)
    except GuessError as e:
        error_response = {
            'success': False,
            **e.to_dict()
        }
        game_logger.log_server_response(
            request, 'submit_guess', False, error_response, game_id,
            validation_error=e.code, attempted_guess=guess
        )
        return jsonify(error_response), 400

    response_data = {
        'success': True,
        'result': scored.to_pairs(),
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'submit_guess', True, response_data, game_id,
        guess=scored.word, round=state.current_round, game_over=state.game_over
    )

    return jsonify(response_data)


@game_bp.route('/game/<game_id>/validate', methods=['POST'])
@require_game_service
def validate_guess(game_service, game_id):
    """Check a guess without spending an attempt."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return _bad_request('validate_guess', JSON_OBJECT_REQUIRED, game_id)
    guess = data.get('guess', '')

    if game_service.get_game(game_id) is None:
        return _game_not_found('validate_guess', game_id)

    is_valid, error = game_service.is_valid_guess(game_id, guess)
    return jsonify({
        'success': True,
        'valid': is_valid,
        'error': error or None
    })


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_service, game_id):
    """Delete a game session."""
    game_logger.log_user_action(request, 'delete_game', game_id)

    success = game_service.delete_game(game_id)

    response_data = {
        'success': success
    }

    game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

    if success:
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy',
        'active_games': game_service.active_games,
        'total_games': len(game_service.games),
        'answer_words': len(game_service.catalog),
        'answer_stats': get_word_statistics(list(game_service.catalog.answers)),
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)

    return jsonify(response_data)
