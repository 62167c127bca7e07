"""
Image Storage Service

Writes uploaded images under generated names in the upload folder.
"""

import logging
import os
import uuid

from flask import current_app

from blog_backend.errors import BadRequest, PayloadTooLarge

logger = logging.getLogger(__name__)


def _file_size(file):
    stream = file.stream
    position = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(position)
    return size


def generate_filename(original_name, prefix='image'):
    """Unique name that keeps the original extension, e.g. ``image-<hex>.png``."""
    _, ext = os.path.splitext(original_name or '')
    if not ext[1:].isalnum():
        ext = ''
    return f'{prefix}-{uuid.uuid4().hex}{ext.lower()}'


def store_image(file):
    """Save an uploaded image and return its generated filename."""
    if file is None or not file.filename:
        raise BadRequest('No file uploaded')

    config = current_app.config
    max_bytes = config['UPLOAD_MAX_BYTES']
    if _file_size(file) > max_bytes:
        raise PayloadTooLarge(f'File exceeds the {max_bytes} byte limit')

    _, ext = os.path.splitext(file.filename)
    if ext.lower() not in config['UPLOAD_ALLOWED_EXTENSIONS']:
        raise BadRequest('Only image files can be uploaded')

    filename = generate_filename(file.filename)
    folder = config['UPLOAD_FOLDER']
    os.makedirs(folder, exist_ok=True)
    file.save(os.path.join(folder, filename))
    logger.info('Stored upload %r as %s', file.filename, filename)
    return filename
