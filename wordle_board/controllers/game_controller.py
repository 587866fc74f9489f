"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, current_app, jsonify, request
from ..models.errors import ConfigurationError
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service=None):
    """Start a new game with the configured board size."""
    try:
        game_logger.log_user_action(request, 'new_game')

        game_service.initialize(
            current_app.config['WORD_LENGTH'],
            current_app.config['NUM_ATTEMPTS']
        )
        state = game_service.get_board_state()

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data,
            word_length=state.word_length, max_attempts=state.max_attempts
        )

        return jsonify(response_data)

    except ConfigurationError as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/state', methods=['GET'])
@require_game_service
def get_state(game_service=None):
    """Get current board state."""
    game_logger.log_user_action(request, 'get_state')

    state = game_service.get_board_state()
    response_data = {
        'success': True,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'get_state', True, response_data,
        attempts_used=state.attempts_used, game_over=state.game_over
    )

    return jsonify(response_data)


@game_bp.route('/game/key', methods=['POST'])
@require_game_service
def press_key(game_service=None):
    """Feed one key press (letter, Backspace or Enter) into the game."""
    data = request.get_json(silent=True)
    if not data or not isinstance(data.get('key'), str):
        error_response = {
            'success': False,
            'error': 'Key is required'
        }
        game_logger.log_server_response(request, 'key_press', False, error_response)
        return jsonify(error_response), 400

    key = data['key']
    game_logger.log_user_action(request, 'key_press', key=key)

    previous_status = game_service.status
    changed = game_service.handle_key(key)
    state = game_service.get_board_state()

    response_data = {
        'success': True,
        'changed': changed,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'key_press', True, response_data,
        key=key, changed=changed, attempts_used=state.attempts_used
    )
    game_logger.log_key_outcome(game_service, previous_status, request.remote_addr, key, changed)

    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service=None):
    """Health check endpoint."""
    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy',
        'game_status': game_service.status.value,
        'dictionary_size': len(game_service.dictionary),
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)

    return jsonify(response_data)


@game_bp.errorhandler(Exception)
def handle_unexpected_error(error):
    """Report unexpected failures in the JSON shape the client expects."""
    game_logger.log_error(request, error, request.endpoint or 'unknown')
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, request.endpoint or 'unknown', False, error_response)
    return jsonify(error_response), 500
