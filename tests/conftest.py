import pytest

from blog_backend import create_app
from blog_backend.config import TestConfig
from blog_backend.extensions import db
from blog_backend.models import User
from werkzeug.security import generate_password_hash


ADMIN_USERNAME = 'admin'
ADMIN_PASSWORD = 's3cret-pass'


@pytest.fixture(scope='session')
def app(tmp_path_factory):
    upload_dir = tmp_path_factory.mktemp('uploads')

    class Config(TestConfig):
        UPLOAD_FOLDER = str(upload_dir)

    return create_app(Config)


@pytest.fixture(autouse=True)
def reset_db(app):
    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.create_all()
    yield
    with app.app_context():
        db.session.remove()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin(client):
    r = client.post('/auth/register', json={'username': ADMIN_USERNAME, 'password': ADMIN_PASSWORD})
    assert r.status_code == 201
    return {'username': ADMIN_USERNAME, 'password': ADMIN_PASSWORD}


@pytest.fixture()
def admin_client(client, admin):
    r = client.post('/auth/login', json=admin)
    assert r.status_code == 200
    return client


@pytest.fixture()
def regular_user(app):
    with app.app_context():
        user = User(username='reader', password_hash=generate_password_hash('readerpass'), is_admin=False)
        db.session.add(user)
        db.session.commit()
    return {'username': 'reader', 'password': 'readerpass'}


def make_post(client, **overrides):
    body = {'title': 'Hello', 'content': 'First post', 'image': 'image-abc.png'}
    body.update(overrides)
    return client.post('/posts', json=body)
