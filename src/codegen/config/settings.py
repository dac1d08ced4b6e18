"""
Application Configuration
========================

Configuration settings for different environments.
"""

import os
from pathlib import Path
from typing import Any, Dict, Type


def _env_bool(name: str, default: str = 'false') -> bool:
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')


def _env_origins(name: str):
    raw = os.environ.get(name, '*').strip()
    if raw == '*':
        return raw
    return [origin.strip() for origin in raw.split(',') if origin.strip()]


class Config:
    """Base configuration class."""

    # Basic Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Database settings (history store)
    BASE_DIR = Path(__file__).resolve().parent.parent.parent  # .../src
    DATABASE_PATH = BASE_DIR / 'data' / 'codegen.db'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Remote completion API (OpenAI-compatible chat completions)
    OPENROUTER_API_KEY = os.environ.get('OPENROUTER_API_KEY', '')
    OPENROUTER_API_URL = os.environ.get('OPENROUTER_API_URL', 'https://openrouter.ai/api/v1/chat/completions')
    OPENROUTER_MODEL = os.environ.get('OPENROUTER_MODEL', 'openai/gpt-3.5-turbo')
    OPENROUTER_SITE_URL = os.environ.get('OPENROUTER_SITE_URL', 'https://ai-code-generator.local')
    OPENROUTER_SITE_NAME = os.environ.get('OPENROUTER_SITE_NAME', 'AI Code Generator')

    # Generation parameters
    GENERATION_MAX_TOKENS = int(os.environ.get('GENERATION_MAX_TOKENS', '1000'))
    GENERATION_TEMPERATURE = float(os.environ.get('GENERATION_TEMPERATURE', '0.7'))
    GENERATION_TIMEOUT = int(os.environ.get('GENERATION_TIMEOUT', '300'))

    # History store
    HISTORY_ENABLED = _env_bool('HISTORY_ENABLED', 'true')
    HISTORY_LIMIT = int(os.environ.get('HISTORY_LIMIT', '50'))

    # Origins allowed to call /api/* (comma separated, or *)
    CORS_ORIGINS = _env_origins('CORS_ORIGINS')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Attach exception type and stacktrace to 500 responses outside debug mode
    SHOW_ERROR_DETAILS = _env_bool('SHOW_ERROR_DETAILS')

    TESTING = False
    DEBUG = False


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # Never reach out to the network from tests unless a test opts in
    OPENROUTER_API_KEY = ''


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig,
}


def get_config(config_name: str = 'default') -> Type[Config]:
    """Return the configuration class for a name, falling back to default."""
    return config.get(config_name, config['default'])


def config_values(config_name: str = 'default') -> Dict[str, Any]:
    """Upper-case settings of a configuration class as a plain dict."""
    config_class = get_config(config_name)
    return {key: getattr(config_class, key) for key in dir(config_class) if key.isupper()}
