"""
Uploads Blueprint

Image upload and read-only retrieval of stored images.
"""

from flask import Blueprint

uploads_bp = Blueprint('uploads', __name__)

from blog_backend.uploads import routes  # noqa: E402, F401
