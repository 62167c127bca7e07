"""
Messages Blueprint
"""

from flask import Blueprint

messages_bp = Blueprint('messages', __name__)

from blog_backend.messages import routes  # noqa: E402, F401
