"""
Posts Service

CRUD over blog posts.
"""

import logging

from flask import current_app

from blog_backend.errors import NotFound
from blog_backend.extensions import db
from blog_backend.models import Post
from blog_backend.schemas import PostPayload, parse_payload

logger = logging.getLogger(__name__)

MISSING_FIELDS = 'Send all required fields: title, content, image'


def list_posts(limit=None):
    """Newest posts first, capped at the configured page size."""
    if limit is None:
        limit = current_app.config['POSTS_PAGE_SIZE']
    return Post.query.order_by(Post.created_at.desc(), Post.id.desc()).limit(limit).all()


def get_post(post_id):
    post = db.session.get(Post, post_id)
    if post is None:
        raise NotFound('Post not found')
    return post


def create_post(data, author=None):
    payload = parse_payload(PostPayload, data, MISSING_FIELDS)
    post = Post(
        title=payload.title,
        content=payload.content,
        image=payload.image,
        author_id=author.id if author is not None else None,
    )
    db.session.add(post)
    db.session.commit()
    logger.info('Post %s created', post.id)
    return post


def update_post(post_id, data):
    """Overwrite title, content and image; createdAt and author stay as they are."""
    payload = parse_payload(PostPayload, data, MISSING_FIELDS)
    post = get_post(post_id)
    post.title = payload.title
    post.content = payload.content
    post.image = payload.image
    db.session.commit()
    logger.info('Post %s updated', post.id)
    return post


def delete_post(post_id):
    post = get_post(post_id)
    db.session.delete(post)
    db.session.commit()
    logger.info('Post %s deleted', post_id)
