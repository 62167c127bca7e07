"""
Auth Decorators

Gates that run ahead of a view and stop the request with Unauthorized.
"""

from functools import wraps

from flask import current_app
from flask_login import current_user

from blog_backend.errors import Unauthorized


def admin_required(f):
    """Decorator to ensure the request is from the logged-in admin.

    - No session at all: ``Unauthorized``
    - A session whose user lacks the admin flag: ``Unauthorized - Admin only``
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            raise Unauthorized('Unauthorized')
        if not current_user.is_admin:
            raise Unauthorized('Unauthorized - Admin only')
        return f(*args, **kwargs)
    return wrapper


def admin_required_if(setting):
    """Apply ``admin_required`` only while the config flag ``setting`` is on."""
    def decorator(f):
        gated = admin_required(f)

        @wraps(f)
        def wrapper(*args, **kwargs):
            if current_app.config.get(setting):
                return gated(*args, **kwargs)
            return f(*args, **kwargs)
        return wrapper
    return decorator
