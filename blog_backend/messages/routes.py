"""
Messages Routes

The contact form posts here without a session. Reading and deleting are open
too unless MESSAGES_REQUIRE_AUTH is set.
"""

from flask import jsonify, request

from blog_backend.auth.decorators import admin_required_if
from blog_backend.messages import messages_bp
from blog_backend.services import messages as message_service


@messages_bp.route('', methods=['POST'])
def create_message():
    message = message_service.create_message(request.get_json(silent=True))
    return jsonify({'message': 'Message created successfully', 'data': message.to_dict()}), 201


@messages_bp.route('', methods=['GET'])
@admin_required_if('MESSAGES_REQUIRE_AUTH')
def list_messages():
    messages = message_service.list_messages()
    return jsonify({'messages': [m.to_dict() for m in messages]})


@messages_bp.route('/<int:message_id>', methods=['GET'])
@admin_required_if('MESSAGES_REQUIRE_AUTH')
def get_message(message_id):
    message = message_service.get_message(message_id)
    return jsonify({'data': message.to_dict()})


@messages_bp.route('/<int:message_id>', methods=['DELETE'])
@admin_required_if('MESSAGES_REQUIRE_AUTH')
def delete_message(message_id):
    message_service.delete_message(message_id)
    return jsonify({'message': 'Message deleted successfully'})
