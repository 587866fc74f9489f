"""
WebSocket Event Handlers

Handles WebSocket events so the board can be driven key by key and receive
updates pushed by the server (info message fade and clear).
"""

from dataclasses import asdict
from flask import current_app, request
from flask_socketio import emit
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_game_service_required
from ..utils.game_logger import game_logger


# Message listener installed by the most recent register_websocket_handlers call
_board_listener = None


def board_payload(game_service) -> dict:
    return {
        'success': True,
        'state': asdict(game_service.get_board_state())
    }


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    global _board_listener

    def broadcast_board_state(messages=None):
        """Push the board to every client; runs outside request context."""
        game_service = get_game_service()
        if game_service:
            socketio.emit('board_update', board_payload(game_service))

    game_service = get_game_service()
    if game_service:
        # A later app replaces the listener of an earlier one
        if _board_listener is not None:
            game_service.messages.unsubscribe(_board_listener)
        game_service.messages.subscribe(broadcast_board_state)
        _board_listener = broadcast_board_state

    @socketio.on('connect')
    @websocket_game_service_required
    def handle_connect(auth=None, game_service=None):
        """Send the current board to a newly connected client."""
        game_logger.log_user_action(request, 'connect')
        emit('board_update', board_payload(game_service))

    @socketio.on('key_press')
    @websocket_game_service_required
    def handle_key_press(data, game_service=None):
        """Feed one key press into the game and reply with the board."""
        key = data.get('key') if isinstance(data, dict) else None
        if not isinstance(key, str):
            emit('error', {'error': 'Key is required'})
            return

        game_logger.log_user_action(request, 'key_press', key=key)

        previous_status = game_service.status
        changed = game_service.handle_key(key)
        payload = board_payload(game_service)
        payload['changed'] = changed

        game_logger.log_server_response(request, 'key_press', True, payload, key=key, changed=changed)
        game_logger.log_key_outcome(game_service, previous_status, request.remote_addr, key, changed)
        emit('board_update', payload)

    @socketio.on('new_game')
    @websocket_game_service_required
    def handle_new_game(data=None, game_service=None):
        """Start a new game with the configured board size."""
        game_logger.log_user_action(request, 'new_game')

        game_service.initialize(
            current_app.config['WORD_LENGTH'],
            current_app.config['NUM_ATTEMPTS']
        )
        payload = board_payload(game_service)

        game_logger.log_server_response(request, 'new_game', True, payload)
        emit('board_update', payload)
