import datetime

from .. import db
from ..models.message_model import Message
from ..schemas.message_schema import message_schema


def get_messages(project_id=None):
    # Chat history is shown in the order messages were appended
    query = Message.query
    if project_id is not None:
        query = query.filter_by(project_id=project_id)
    return query.order_by(Message.id).all()


def create_message(data):
    fields = message_schema.load(data)
    if fields.get('timestamp') is None:
        fields['timestamp'] = datetime.datetime.now(datetime.timezone.utc)

    new_message = Message(**fields)
    db.session.add(new_message)
    db.session.commit()
    return new_message
