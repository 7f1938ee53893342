"""
Application Configuration

Flask, database, logging and recipe matching settings, one class per
environment. Values can be overridden through environment variables.
"""

import os

from constants import DEFAULT_MATCH_TOLERANCE, DEFAULT_SLOT_MATCH_LIMIT, MATCH_FIELDS

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def tolerance_from_env():
    """Match tolerance per macro, e.g. MATCH_TOLERANCE_PROTEIN=8."""
    tolerance = dict(DEFAULT_MATCH_TOLERANCE)
    for field in MATCH_FIELDS:
        value = os.environ.get(f'MATCH_TOLERANCE_{field.upper()}')
        if value is not None:
            tolerance[field] = float(value)
    return tolerance


class Config:
    """Base configuration class."""

    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL', 'sqlite:///' + os.path.join(BASE_DIR, 'coaching.db')
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Meal slot recipe suggestions
    SLOT_MATCH_LIMIT = int(os.environ.get('SLOT_MATCH_LIMIT', DEFAULT_SLOT_MATCH_LIMIT))
    NUTRITION_MATCH_TOLERANCE = tolerance_from_env()


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'WARNING'
    SLOT_MATCH_LIMIT = DEFAULT_SLOT_MATCH_LIMIT
    NUTRITION_MATCH_TOLERANCE = dict(DEFAULT_MATCH_TOLERANCE)


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Config class for env (defaults to FLASK_ENV, then development)."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
