"""
Posts Blueprint
"""

from flask import Blueprint

posts_bp = Blueprint('posts', __name__)

from blog_backend.posts import routes  # noqa: E402, F401
