import pytest

from blog_backend.extensions import db
from blog_backend.models import Post
from tests.conftest import make_post


def test_create_and_fetch_post(client):
    r = make_post(client)
    assert r.status_code == 201
    post = r.get_json()
    assert post['id']
    assert post['title'] == 'Hello'
    assert post['image'] == 'image-abc.png'
    assert post['author'] is None
    assert post['createdAt']

    r = client.get(f"/posts/{post['id']}")
    assert r.status_code == 200
    assert r.get_json()['post'] == post


@pytest.mark.parametrize('missing', ['title', 'content', 'image'])
def test_create_post_requires_each_field(client, missing):
    body = {'title': 'T', 'content': 'C', 'image': 'img.png'}
    del body[missing]
    r = client.post('/posts', json=body)
    assert r.status_code == 400
    assert r.get_json() == {'message': 'Send all required fields: title, content, image'}


def test_create_post_rejects_blank_title(client):
    r = make_post(client, title='   ')
    assert r.status_code == 400


def test_create_post_by_admin_records_author(admin_client, admin):
    r = make_post(admin_client)
    assert r.status_code == 201
    assert r.get_json()['author']['username'] == admin['username']


def test_get_missing_post(client):
    r = client.get('/posts/999')
    assert r.status_code == 404
    assert r.get_json() == {'message': 'Post not found'}


def test_list_posts_caps_at_eight_newest_first(app, client):
    for i in range(10):
        assert make_post(client, title=f'post {i}').status_code == 201

    r = client.get('/posts')
    assert r.status_code == 200
    titles = [p['title'] for p in r.get_json()['posts']]
    assert len(titles) == 8
    assert titles == [f'post {i}' for i in range(9, 1, -1)]


def test_update_post_keeps_created_at(app, client):
    created = make_post(client).get_json()

    r = client.put(f"/posts/{created['id']}",
                   json={'title': 'Changed', 'content': 'New body', 'image': 'image-new.jpg'})
    assert r.status_code == 200
    data = r.get_json()
    assert data['message'] == 'Post updated successfully'
    assert data['post']['title'] == 'Changed'
    assert data['post']['image'] == 'image-new.jpg'
    assert data['post']['createdAt'] == created['createdAt']

    with app.app_context():
        assert db.session.get(Post, created['id']).content == 'New body'


def test_update_post_validation_and_missing(client):
    created = make_post(client).get_json()

    r = client.put(f"/posts/{created['id']}", json={'title': 'Only a title'})
    assert r.status_code == 400

    r = client.put('/posts/12345', json={'title': 'T', 'content': 'C', 'image': 'i.png'})
    assert r.status_code == 404


def test_delete_post_requires_session(client):
    created = make_post(client).get_json()
    r = client.delete(f"/posts/{created['id']}")
    assert r.status_code == 401
    assert r.get_json() == {'message': 'Unauthorized'}

    assert client.get(f"/posts/{created['id']}").status_code == 200


def test_delete_post_rejects_non_admin(client, regular_user):
    created = make_post(client).get_json()
    client.post('/auth/login', json=regular_user)

    r = client.delete(f"/posts/{created['id']}")
    assert r.status_code == 401
    assert r.get_json() == {'message': 'Unauthorized - Admin only'}


def test_admin_deletes_post(admin_client):
    created = make_post(admin_client).get_json()

    r = admin_client.delete(f"/posts/{created['id']}")
    assert r.status_code == 200
    assert r.get_json() == {'message': 'Post deleted successfully'}

    assert admin_client.get(f"/posts/{created['id']}").status_code == 404
    assert admin_client.delete(f"/posts/{created['id']}").status_code == 404


def test_write_policy_gates_create_and_update(app, client, monkeypatch):
    created = make_post(client).get_json()
    monkeypatch.setitem(app.config, 'POSTS_WRITE_REQUIRES_ADMIN', True)

    assert make_post(client).status_code == 401
    r = client.put(f"/posts/{created['id']}", json={'title': 'T', 'content': 'C', 'image': 'i.png'})
    assert r.status_code == 401
    assert client.get('/posts').status_code == 200
