"""
Classboard configuration classes.
"""
import os

from dotenv import load_dotenv

load_dotenv()


def _split_emails(raw):
    return [e.strip().lower() for e in (raw or '').split(',') if e.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev_key_please_change')

    # Google OAuth
    GOOGLE_CLIENT_ID = os.environ.get('GOOGLE_CLIENT_ID')
    GOOGLE_CLIENT_SECRET = os.environ.get('GOOGLE_CLIENT_SECRET')

    # Emails allowed into /admin
    ADMIN_EMAILS = _split_emails(os.environ.get('ADMIN_EMAILS'))

    # Content backend: 'firebase' or 'memory'
    CONTENT_BACKEND = os.environ.get('CONTENT_BACKEND', 'firebase')
    FIREBASE_CREDENTIALS_PATH = os.environ.get('FIREBASE_CREDENTIALS_PATH', 'serviceAccountKey.json')
    FIREBASE_STORAGE_BUCKET = os.environ.get('FIREBASE_STORAGE_BUCKET')

    SEARCH_HISTORY_KEY = os.environ.get('SEARCH_HISTORY_KEY', 'classboard-search-history')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Uploads larger than this are rejected by Flask (25 MB)
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 25 * 1024 * 1024))

    BABEL_DEFAULT_LOCALE = 'en'
    LANGUAGES = ['en', 'es']


class DevelopmentConfig(Config):
    DEBUG = True
    CONTENT_BACKEND = os.environ.get('CONTENT_BACKEND', 'memory')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing'
    CONTENT_BACKEND = 'memory'
    ADMIN_EMAILS = ['admin@example.com']
    GOOGLE_CLIENT_ID = 'test-client-id'
    GOOGLE_CLIENT_SECRET = 'test-client-secret'


class ProductionConfig(Config):
    DEBUG = False


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig,
}
