"""
Application Configuration

Centralizes all Flask and converter configuration settings.
"""

import os

from constants import METRIC, MEASUREMENT_SYSTEMS, FAHRENHEIT, MAX_BATCH_INGREDIENTS


def _env_measurement_system():
    system = os.environ.get('MEASUREMENT_SYSTEM', METRIC).strip().lower()
    return system if system in MEASUREMENT_SYSTEMS else METRIC


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')
    JSON_SORT_KEYS = False

    # Converter settings
    DEFAULT_MEASUREMENT_SYSTEM = _env_measurement_system()
    DEFAULT_TEMPERATURE_UNIT = os.environ.get('TEMPERATURE_UNIT', FAHRENHEIT).strip().upper()
    MAX_BATCH_INGREDIENTS = MAX_BATCH_INGREDIENTS

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEFAULT_MEASUREMENT_SYSTEM = METRIC
    DEFAULT_TEMPERATURE_UNIT = FAHRENHEIT


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
