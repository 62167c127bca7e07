"""
User Model
"""

from datetime import datetime

from flask_login import UserMixin

from blog_backend.extensions import db


class User(UserMixin, db.Model):
    """Admin account used to log into the backend"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    is_admin = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    posts = db.relationship('Post', backref='author', lazy=True)

    def to_dict(self):
        """Public fields only, the password hash never leaves the model."""
        return {
            'id': self.id,
            'username': self.username,
            'isAdmin': self.is_admin,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<User {self.username}>'


# At most one admin row, enforced by the database as well as at registration
db.Index(
    'uq_users_single_admin',
    User.is_admin,
    unique=True,
    sqlite_where=User.is_admin.is_(True),
    postgresql_where=User.is_admin.is_(True),
)
