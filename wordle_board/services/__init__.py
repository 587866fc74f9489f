"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameService, get_game_service, initialize_game_service
from .message_service import MessageBoard, TimerScheduler

__all__ = [
    'GameService', 'get_game_service', 'initialize_game_service',
    'MessageBoard', 'TimerScheduler'
]
