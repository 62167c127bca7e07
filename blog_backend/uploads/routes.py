"""
Upload Routes
"""

from flask import current_app, jsonify, request, send_from_directory

from blog_backend.services import storage
from blog_backend.uploads import uploads_bp


@uploads_bp.route('/upload', methods=['POST'])
def upload_image():
    """Store the file sent under the ``image`` field and return its new name"""
    filename = storage.store_image(request.files.get('image'))
    return jsonify({'filename': filename})


@uploads_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
