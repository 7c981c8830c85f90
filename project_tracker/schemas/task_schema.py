from marshmallow import fields, validate

from .base_schema import TrackerSchema
from ..models.task_model import TASK_PRIORITIES, TASK_STATUSES, TODO


class TaskSchema(TrackerSchema):
    strip_fields = ('title', 'description', 'assignee')

    id = fields.Integer(dump_only=True)
    project_id = fields.Integer(data_key='projectId', required=True)
    title = fields.String(required=True, validate=validate.Length(min=1))
    description = fields.String(allow_none=True)
    assignee = fields.String(required=True, validate=validate.Length(min=1))
    priority = fields.String(load_default='Medium', validate=validate.OneOf(TASK_PRIORITIES))
    due_date = fields.Date(data_key='dueDate', required=True)
    status = fields.String(load_default=TODO, validate=validate.OneOf(TASK_STATUSES))
    created_by = fields.String(data_key='createdBy', allow_none=True)


class StoredTaskSchema(TaskSchema):
    id = fields.Integer()


class TaskStatusSchema(TrackerSchema):
    status = fields.String(required=True, validate=validate.OneOf(TASK_STATUSES))
    actor_email = fields.String(data_key='actorEmail', required=True)


task_schema = TaskSchema()
tasks_schema = TaskSchema(many=True)
stored_task_schema = StoredTaskSchema()
task_status_schema = TaskStatusSchema()
