"""
Mail Notification Service

Sends the site owner a notification for each new contact message. The mail
is composed and delivered on a small thread pool through aiosmtplib; the
outcome is only logged.
"""

import asyncio
import atexit
import logging
from concurrent.futures import ThreadPoolExecutor
from email.message import EmailMessage
from email.utils import formatdate, make_msgid
from html import escape

import aiosmtplib

logger = logging.getLogger(__name__)

NOTIFICATION_SUBJECT = 'New Contact Form Message'


def header_safe(value):
    """Return ``value`` if it can go into a mail header, else None."""
    if not value or '\r' in value or '\n' in value:
        return None
    return value


class Mailer:
    """SMTP sender bound to an application's MAIL_* settings."""

    def __init__(self, app=None):
        self.settings = {}
        self.executor = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        config = app.config
        self.settings = {
            'server': config['MAIL_SERVER'],
            'port': config['MAIL_PORT'],
            'use_tls': config['MAIL_USE_TLS'],
            'username': config['MAIL_USERNAME'],
            'password': config['MAIL_PASSWORD'],
            'sender': config['MAIL_DEFAULT_SENDER'],
            'recipient': config['MAIL_NOTIFY_RECIPIENT'],
            'timeout': config['MAIL_TIMEOUT'],
        }
        self.executor = ThreadPoolExecutor(
            max_workers=config['MAIL_WORKERS'],
            thread_name_prefix='mailer',
        )
        atexit.register(self.shutdown)
        app.extensions['mailer'] = self

    def build_notification(self, contact):
        """Compose the notification for a contact message given as a dict."""
        name = contact.get('name') or 'anonymous'
        email = contact.get('email') or 'no email given'
        phone = contact.get('phonenumber') or 'not given'
        body = contact.get('message') or ''
        text = (
            f'You have received a new message from {name} ({email}):\n\n'
            f'{body}\n\n'
            f'Phone Number: {phone}\n'
        )
        html = (
            f'<p>You have received a new message from <strong>{escape(name)}</strong> '
            f'({escape(email)}):</p>'
            f'<p>{escape(body)}</p>'
            f'<p>Phone Number: {escape(phone)}</p>'
        )

        mail = EmailMessage()
        mail['Subject'] = NOTIFICATION_SUBJECT
        mail['From'] = self.settings['sender']
        mail['To'] = self.settings['recipient']
        reply_to = header_safe(contact.get('email'))
        if reply_to:
            mail['Reply-To'] = reply_to
        mail['Date'] = formatdate(localtime=True)
        mail['Message-ID'] = make_msgid()
        mail.set_content(text)
        mail.add_alternative(html, subtype='html')
        return mail

    def notify_new_message(self, message):
        """Queue the notification and return its Future."""
        # Snapshot the row here, the pool thread has no db session
        contact = message.to_dict()
        future = self.executor.submit(self._send_notification, contact)
        future.add_done_callback(lambda f: self._log_outcome(f, contact['id']))
        return future

    def _send_notification(self, contact):
        self.deliver(self.build_notification(contact))

    def deliver(self, mail):
        asyncio.run(self._async_send(mail))

    async def _async_send(self, mail):
        settings = self.settings
        smtp = aiosmtplib.SMTP(
            hostname=settings['server'],
            port=settings['port'],
            timeout=settings['timeout'],
            use_tls=settings['port'] == 465,
            start_tls=False,
        )
        await smtp.connect()
        try:
            if settings['use_tls'] and settings['port'] != 465:
                await smtp.starttls()
            if settings['username'] and settings['password']:
                await smtp.login(settings['username'], settings['password'])
            await smtp.send_message(mail)
        finally:
            await smtp.quit()

    @staticmethod
    def _log_outcome(future, message_id):
        error = future.exception()
        if error is not None:
            logger.error('Notification for message %s failed: %s', message_id, error)
        else:
            logger.info('Notification for message %s sent', message_id)

    def shutdown(self, wait=True):
        if self.executor is not None:
            self.executor.shutdown(wait=wait)
