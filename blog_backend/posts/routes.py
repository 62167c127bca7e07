"""
Posts Routes

Anyone may read, create and update posts unless POSTS_WRITE_REQUIRES_ADMIN is
set; deleting always needs the admin session.
"""

from flask import jsonify, request
from flask_login import current_user

from blog_backend.auth.decorators import admin_required, admin_required_if
from blog_backend.posts import posts_bp
from blog_backend.services import posts as post_service


@posts_bp.route('', methods=['GET'])
def list_posts():
    posts = post_service.list_posts()
    return jsonify({'posts': [p.to_dict() for p in posts]})


@posts_bp.route('', methods=['POST'])
@admin_required_if('POSTS_WRITE_REQUIRES_ADMIN')
def create_post():
    author = current_user if current_user.is_authenticated else None
    post = post_service.create_post(request.get_json(silent=True), author=author)
    return jsonify(post.to_dict()), 201


@posts_bp.route('/<int:post_id>', methods=['GET'])
def get_post(post_id):
    post = post_service.get_post(post_id)
    return jsonify({'post': post.to_dict()})


@posts_bp.route('/<int:post_id>', methods=['PUT'])
@admin_required_if('POSTS_WRITE_REQUIRES_ADMIN')
def update_post(post_id):
    post = post_service.update_post(post_id, request.get_json(silent=True))
    return jsonify({'message': 'Post updated successfully', 'post': post.to_dict()})


@posts_bp.route('/<int:post_id>', methods=['DELETE'])
@admin_required
def delete_post(post_id):
    post_service.delete_post(post_id)
    return jsonify({'message': 'Post deleted successfully'})
