"""
Configuration settings for the blog backend
"""
import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_list(name, default=''):
    raw = os.environ.get(name, default)
    return [item.strip() for item in raw.split(',') if item.strip()]


class Config:
    """Flask application configuration"""

    APP_ENV = os.environ.get('APP_ENV', 'development')
    IS_PRODUCTION = APP_ENV == 'production'

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'blog.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DATABASE_REQUIRE_TLS = _env_flag('DATABASE_REQUIRE_TLS')
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}
    if DATABASE_REQUIRE_TLS and SQLALCHEMY_DATABASE_URI.startswith('postgresql'):
        SQLALCHEMY_ENGINE_OPTIONS['connect_args'] = {'sslmode': 'require'}

    # Server-side sessions (Flask-Session, stored next to the other tables)
    SESSION_TYPE = 'sqlalchemy'
    SESSION_SQLALCHEMY_TABLE = 'sessions'
    SESSION_PERMANENT = True
    PERMANENT_SESSION_LIFETIME = timedelta(hours=24)
    SESSION_COOKIE_NAME = 'blog_session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = IS_PRODUCTION
    SESSION_COOKIE_SAMESITE = 'None' if IS_PRODUCTION else 'Lax'

    # Cross-origin access
    CORS_ORIGINS = _env_list('CORS_ORIGINS', 'http://localhost:5173')
    TRUST_PROXY = _env_flag('TRUST_PROXY', True)

    # Uploads
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(basedir, 'uploads')
    UPLOAD_MAX_BYTES = int(os.environ.get('UPLOAD_MAX_BYTES', 5000000))
    # Whole-request cap leaves room for the multipart envelope around the file
    MAX_CONTENT_LENGTH = UPLOAD_MAX_BYTES + 64 * 1024
    UPLOAD_ALLOWED_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.gif', '.webp', '.svg'}

    # Posts
    POSTS_PAGE_SIZE = 8
    POSTS_WRITE_REQUIRES_ADMIN = _env_flag('POSTS_WRITE_REQUIRES_ADMIN')

    # Contact messages
    MESSAGES_REQUIRE_AUTH = _env_flag('MESSAGES_REQUIRE_AUTH')
    MESSAGES_VALIDATE_EMAIL = _env_flag('MESSAGES_VALIDATE_EMAIL')

    # Outbound notification mail
    MAIL_NOTIFY_ENABLED = _env_flag('MAIL_NOTIFY_ENABLED')
    MAIL_SERVER = os.environ.get('MAIL_SERVER', 'localhost')
    MAIL_PORT = int(os.environ.get('MAIL_PORT', 587))
    MAIL_USE_TLS = _env_flag('MAIL_USE_TLS', True)
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD')
    MAIL_DEFAULT_SENDER = os.environ.get('MAIL_DEFAULT_SENDER', 'no-reply@localhost')
    MAIL_NOTIFY_RECIPIENT = os.environ.get('MAIL_NOTIFY_RECIPIENT', 'admin@localhost')
    MAIL_TIMEOUT = int(os.environ.get('MAIL_TIMEOUT', 10))
    MAIL_WORKERS = 2

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')


class ProductionConfig(Config):
    """Production configuration"""
    APP_ENV = 'production'
    IS_PRODUCTION = True
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_SAMESITE = 'None'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    APP_ENV = 'testing'
    IS_PRODUCTION = False
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_SAMESITE = 'Lax'
    CORS_ORIGINS = ['http://frontend.test']
    MAIL_NOTIFY_ENABLED = False
    LOG_DIR = None
