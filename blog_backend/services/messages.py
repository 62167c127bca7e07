"""
Messages Service

Contact-form messages. Creating one may notify the site owner by mail; the
notification runs in the background and never affects the stored result.
"""

import logging

from flask import current_app

from blog_backend.errors import NotFound
from blog_backend.extensions import db
from blog_backend.models import Message
from blog_backend.schemas import MessagePayload, ValidatedMessagePayload, parse_payload

logger = logging.getLogger(__name__)


def create_message(data):
    config = current_app.config
    if config['MESSAGES_VALIDATE_EMAIL']:
        payload = parse_payload(ValidatedMessagePayload, data, 'Invalid email address')
    else:
        payload = parse_payload(MessagePayload, data, 'Message fields must be text')

    message = Message(**payload.model_dump())
    db.session.add(message)
    db.session.commit()
    logger.info('Message %s stored', message.id)

    if config['MAIL_NOTIFY_ENABLED']:
        try:
            current_app.extensions['mailer'].notify_new_message(message)
        except Exception:
            logger.exception('Could not queue notification for message %s', message.id)
    return message


def list_messages():
    return Message.query.order_by(Message.created_at.desc(), Message.id.desc()).all()


def get_message(message_id):
    message = db.session.get(Message, message_id)
    if message is None:
        raise NotFound('Message not found')
    return message


def delete_message(message_id):
    message = get_message(message_id)
    db.session.delete(message)
    db.session.commit()
    logger.info('Message %s deleted', message_id)
