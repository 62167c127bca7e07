"""
Auth Service

Registration of the single admin account and credential checks.
"""

import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from blog_backend.errors import BadRequest, Conflict, Unauthorized
from blog_backend.extensions import db
from blog_backend.models import User

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'Incorrect username or password'


def admin_exists():
    return db.session.query(User.id).filter(User.is_admin.is_(True)).first() is not None


def register_admin(username, password):
    """Create the admin account.

    Only one admin may ever exist; once it does every further registration is
    refused with Conflict, whatever the credentials.
    """
    username = (username or '').strip()
    if not username or not password:
        raise BadRequest('Send all required fields: username, password')

    if admin_exists():
        logger.warning('Refused admin registration for %r: admin already exists', username)
        raise Conflict('Admin already exists')

    admin = User(
        username=username,
        password_hash=generate_password_hash(password),
        is_admin=True,
    )
    db.session.add(admin)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration
        db.session.rollback()
        logger.warning('Admin registration for %r rejected by the database', username)
        raise Conflict('Admin already exists')

    logger.info('Admin account %r registered', username)
    return admin


def authenticate(username, password):
    """Return the user matching the credentials or raise Unauthorized."""
    if not username or not password:
        raise BadRequest('Send all required fields: username, password')

    user = User.query.filter_by(username=username.strip()).first()
    if user is None or not check_password_hash(user.password_hash, password):
        logger.warning('Failed login for %r', username)
        raise Unauthorized(INVALID_CREDENTIALS)
    return user
