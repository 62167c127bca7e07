"""
Contact Message Model
"""

from datetime import datetime

from blog_backend.extensions import db


class Message(db.Model):
    """Message left through the public contact form"""
    __tablename__ = 'messages'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200))
    email = db.Column(db.String(254))
    message = db.Column(db.Text)
    phonenumber = db.Column(db.String(50))
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'message': self.message,
            'phonenumber': self.phonenumber,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Message {self.id} from {self.email}>'
