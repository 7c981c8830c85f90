from flask import Blueprint, request, jsonify

from ..schemas.message_schema import message_schema, messages_schema
from ..services.message_service import create_message, get_messages


message_blueprint = Blueprint('message_blueprint', __name__)


@message_blueprint.route('/messages', methods=['GET'])
def list_messages():
    messages = get_messages(project_id=request.args.get('projectId', type=int))
    return jsonify({"success": True, "messages": messages_schema.dump(messages)})


@message_blueprint.route('/messages', methods=['POST'])
def add_message():
    message = create_message(request.get_json())
    return jsonify({"success": True, "message": message_schema.dump(message)})
