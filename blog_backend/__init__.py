"""
Blog Backend - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, jsonify
from sqlalchemy.engine import make_url
from werkzeug.middleware.proxy_fix import ProxyFix

from blog_backend.config import Config
from blog_backend.errors import Unauthorized, register_error_handlers
from blog_backend.extensions import cors, db, login_manager, server_session
from blog_backend.logging_setup import configure_logging
from blog_backend.security import init_security
from blog_backend.services.mailer import Mailer

logger = logging.getLogger(__name__)


def ensure_database_dir(uri):
    """Create the parent directory of a file-backed SQLite database.

    Returns the directory, or None for in-memory and non-SQLite databases.
    """
    url = make_url(uri)
    if url.get_backend_name() != 'sqlite' or not url.database or url.database == ':memory:':
        return None
    directory = os.path.dirname(os.path.abspath(url.database))
    os.makedirs(directory, exist_ok=True)
    return directory


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    configure_logging(app)

    if app.config.get('TRUST_PROXY'):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    ensure_database_dir(app.config['SQLALCHEMY_DATABASE_URI'])

    # Initialize extensions
    db.init_app(app)
    app.config['SESSION_SQLALCHEMY'] = db
    server_session.init_app(app)
    cors.init_app(app, origins=app.config['CORS_ORIGINS'], supports_credentials=True)
    login_manager.init_app(app)
    init_security(app)
    Mailer(app)

    # Register blueprints
    from blog_backend.auth import auth_bp
    from blog_backend.posts import posts_bp
    from blog_backend.messages import messages_bp
    from blog_backend.uploads import uploads_bp

    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(posts_bp, url_prefix='/posts')
    app.register_blueprint(messages_bp, url_prefix='/messages')
    app.register_blueprint(uploads_bp)

    register_error_handlers(app)

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        from blog_backend.models import User
        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        raise Unauthorized('Unauthorized')

    @app.route('/')
    def index():
        return jsonify({'message': 'Welcome to the blog backend!'})

    # Create database tables and the upload folder
    with app.app_context():
        from blog_backend import models  # noqa: F401
        db.create_all()
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    logger.info('Application created (env=%s)', app.config.get('APP_ENV'))
    return app
