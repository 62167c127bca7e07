"""
Services Package

Exports all services for easy importing.
"""

from blog_backend.services.auth import register_admin, authenticate, admin_exists
from blog_backend.services.posts import list_posts, get_post, create_post, update_post, delete_post
from blog_backend.services.messages import create_message, list_messages, get_message, delete_message
from blog_backend.services.storage import store_image, generate_filename
from blog_backend.services.mailer import Mailer

__all__ = [
    'register_admin',
    'authenticate',
    'admin_exists',
    'list_posts',
    'get_post',
    'create_post',
    'update_post',
    'delete_post',
    'create_message',
    'list_messages',
    'get_message',
    'delete_message',
    'store_image',
    'generate_filename',
    'Mailer',
]
