from datetime import datetime

from sqlalchemy import text

from blog_backend.extensions import db
from blog_backend.models import User


def test_register_creates_single_admin(app, client):
    r = client.post('/auth/register', json={'username': 'owner', 'password': 'pw123456'})
    assert r.status_code == 201
    assert r.get_json() == {'message': 'Admin registered successfully'}

    with app.app_context():
        user = User.query.filter_by(username='owner').one()
        assert user.is_admin is True
        assert user.password_hash != 'pw123456'


def test_second_admin_registration_conflicts(client, admin):
    for body in ({'username': 'other', 'password': 'another-pass'},
                 {'username': admin['username'], 'password': admin['password']}):
        r = client.post('/auth/register', json=body)
        assert r.status_code == 409
        assert r.get_json()['message'] == 'Admin already exists'


def test_register_requires_username_and_password(client):
    r = client.post('/auth/register', json={'username': 'owner'})
    assert r.status_code == 400
    assert 'message' in r.get_json()

    r = client.post('/auth/register', data='not json')
    assert r.status_code == 400


def test_login_with_wrong_password(client, admin):
    r = client.post('/auth/login', json={'username': admin['username'], 'password': 'nope'})
    assert r.status_code == 401
    assert r.get_json() == {'message': 'Incorrect username or password'}


def test_login_unknown_user(client, admin):
    r = client.post('/auth/login', json={'username': 'ghost', 'password': 'whatever'})
    assert r.status_code == 401


def test_login_check_logout_cycle(client, admin):
    r = client.get('/auth/check')
    assert r.get_json() == {'isAuthenticated': False}

    r = client.post('/auth/login', json=admin)
    assert r.status_code == 200
    assert r.get_json()['message'] == 'Login successful'

    r = client.get('/auth/check')
    data = r.get_json()
    assert data['isAuthenticated'] is True
    assert data['user']['username'] == admin['username']
    assert data['user']['isAdmin'] is True
    assert 'password' not in data['user']
    assert 'password_hash' not in data['user']

    r = client.get('/auth/logout')
    assert r.status_code == 200
    assert r.get_json() == {'message': 'Logout successful'}

    r = client.get('/auth/check')
    assert r.get_json() == {'isAuthenticated': False}


def test_session_cookie_flags(app, client, admin):
    r = client.post('/auth/login', json=admin)
    cookie = r.headers.get('Set-Cookie')
    assert cookie.startswith(app.config['SESSION_COOKIE_NAME'] + '=')
    assert 'HttpOnly' in cookie
    assert 'SameSite=Lax' in cookie
    assert 'Expires=' in cookie


def test_logout_destroys_server_side_session(app, client, admin):
    client.post('/auth/login', json=admin)
    with app.app_context():
        assert db.session.execute(text('SELECT COUNT(*) FROM sessions')).scalar() == 1

    client.get('/auth/logout')
    with app.app_context():
        assert db.session.execute(text('SELECT COUNT(*) FROM sessions')).scalar() == 0


def test_logout_requires_session(client):
    r = client.get('/auth/logout')
    assert r.status_code == 401
    assert r.get_json() == {'message': 'Unauthorized'}


def test_credentials_must_be_strings(client, admin):
    for path in ('/auth/register', '/auth/login'):
        r = client.post(path, json={'username': 123, 'password': 'pw'})
        assert r.status_code == 400
        assert r.get_json() == {'message': 'Send all required fields: username, password'}

        r = client.post(path, json={'username': 'someone', 'password': ['pw']})
        assert r.status_code == 400

        r = client.post(path, json=['a'])
        assert r.status_code == 400


def test_blank_credentials_are_rejected(client):
    r = client.post('/auth/register', json={'username': '   ', 'password': 'pw123456'})
    assert r.status_code == 400


def test_expired_session_is_not_honoured(app, client, admin):
    client.post('/auth/login', json=admin)
    assert client.get('/auth/check').get_json()['isAuthenticated'] is True

    with app.app_context():
        db.session.execute(text('UPDATE sessions SET expiry = :past'),
                           {'past': datetime(2000, 1, 1)})
        db.session.commit()

    assert client.get('/auth/check').get_json() == {'isAuthenticated': False}


def test_login_rotates_session_id(app, client, admin):
    cookie_name = app.config['SESSION_COOKIE_NAME']

    client.post('/auth/login', json=admin)
    first = client.get_cookie(cookie_name).value

    client.post('/auth/login', json=admin)
    second = client.get_cookie(cookie_name).value

    assert first != second
    assert client.get('/auth/check').get_json()['isAuthenticated'] is True
    with app.app_context():
        assert db.session.execute(text('SELECT COUNT(*) FROM sessions')).scalar() == 1
