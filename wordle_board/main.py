"""
Wordle Board - Main Entry Point

This is the main entry point for the Wordle board.
It loads the dictionary, initializes the game service and starts the
Flask-SocketIO application.
"""

from . import create_app
from .config import Config, WORD_LIST, validate_word_list_integrity, get_word_statistics
from .models.errors import ConfigurationError
from .services.game_service import initialize_game_service
from .services.message_service import MessageBoard
from .utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity(WORD_LIST, Config.WORD_LENGTH)
        stats = get_word_statistics(WORD_LIST)
        print(f"✓ Word list loaded: {stats['total_words']} words {stats['words_by_length']}")

        messages = MessageBoard(Config.MESSAGE_DISPLAY_SECONDS, Config.MESSAGE_FADE_SECONDS)
        initialize_game_service(WORD_LIST, Config.WORD_LENGTH, Config.NUM_ATTEMPTS, messages)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info(
            f"Wordle Board Starting - {Config.NUM_ATTEMPTS} attempts of {Config.WORD_LENGTH} letters"
        )

        print(f"\nStarting Wordle Board on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Board shutting down (KeyboardInterrupt)")
    except ConfigurationError as e:
        print(f"✗ Game setup failed: {e}")
        game_logger.logger.error(f"Game setup failed: {e}")
        raise


if __name__ == '__main__':
    main()
