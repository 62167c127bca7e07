"""
Models Package

Exports all models for easy importing.
"""

from blog_backend.models.user import User
from blog_backend.models.post import Post
from blog_backend.models.message import Message

__all__ = ['User', 'Post', 'Message']
