"""
Flask Extensions

Admin authentication is session-based: Flask-Login keeps the user id in a
server-side session that Flask-Session stores in the same database.
"""

from flask_cors import CORS
from flask_login import LoginManager
from flask_session import Session
from flask_sqlalchemy import SQLAlchemy

# Database instance
db = SQLAlchemy()

# Login manager for the admin account
login_manager = LoginManager()

# Server-side session store
server_session = Session()

# Cross-origin policy
cors = CORS()
