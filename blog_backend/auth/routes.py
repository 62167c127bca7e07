"""
Auth Routes

Session-based admin authentication using Flask-Login.
"""

import logging

from flask import current_app, jsonify, request, session
from flask_login import current_user, login_required, login_user, logout_user

from blog_backend.auth import auth_bp
from blog_backend.schemas import CredentialsPayload, parse_payload
from blog_backend.services import auth as auth_service

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS = 'Send all required fields: username, password'


@auth_bp.route('/register', methods=['POST'])
def register():
    """Register the one and only admin account"""
    creds = parse_payload(CredentialsPayload, request.get_json(silent=True), MISSING_CREDENTIALS)
    auth_service.register_admin(creds.username, creds.password)
    return jsonify({'message': 'Admin registered successfully'}), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    """Admin login route"""
    creds = parse_payload(CredentialsPayload, request.get_json(silent=True), MISSING_CREDENTIALS)
    user = auth_service.authenticate(creds.username, creds.password)

    # Drop whatever anonymous state the client had before binding the user
    session.clear()
    session.permanent = True
    login_user(user)
    # New session id for the authenticated session
    current_app.session_interface.regenerate(session)
    logger.info('User %r logged in', user.username)
    return jsonify({'message': 'Login successful', 'user': user.to_dict()})


@auth_bp.route('/logout')
@login_required
def logout():
    """Destroy the session server-side and expire the cookie"""
    username = current_user.username
    logout_user()
    session.clear()
    logger.info('User %r logged out', username)
    return jsonify({'message': 'Logout successful'})


@auth_bp.route('/check')
def check():
    """Report whether the request carries a valid session"""
    if current_user.is_authenticated:
        return jsonify({'isAuthenticated': True, 'user': current_user.to_dict()})
    return jsonify({'isAuthenticated': False})
