"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv
from .game_settings import (
    MESSAGE_DISPLAY_SECONDS,
    MESSAGE_FADE_SECONDS,
    NUM_ATTEMPTS,
    WORD_LENGTH,
)

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', WORD_LENGTH))
    NUM_ATTEMPTS = int(os.getenv('NUM_ATTEMPTS', NUM_ATTEMPTS))
    MESSAGE_DISPLAY_SECONDS = float(os.getenv('MESSAGE_DISPLAY_SECONDS', MESSAGE_DISPLAY_SECONDS))
    MESSAGE_FADE_SECONDS = float(os.getenv('MESSAGE_FADE_SECONDS', MESSAGE_FADE_SECONDS))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
