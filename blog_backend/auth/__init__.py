"""
Auth Blueprint

Admin registration, login, logout and session status.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from blog_backend.auth import routes  # noqa: E402, F401
