from marshmallow import fields, validate

from .base_schema import TrackerSchema


class MessageSchema(TrackerSchema):
    strip_fields = ('sender', 'text')

    id = fields.Integer(dump_only=True)
    project_id = fields.Integer(data_key='projectId', required=True)
    sender = fields.String(required=True, validate=validate.Length(min=1))
    text = fields.String(required=True, validate=validate.Length(min=1))
    timestamp = fields.DateTime(load_default=None)


class StoredMessageSchema(MessageSchema):
    id = fields.Integer()


message_schema = MessageSchema()
messages_schema = MessageSchema(many=True)
stored_message_schema = StoredMessageSchema()
