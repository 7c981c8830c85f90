from marshmallow import fields, validate

from .base_schema import TrackerSchema


class MilestoneSchema(TrackerSchema):
    id = fields.Integer(required=True)
    name = fields.String(required=True)
    completed = fields.Boolean(load_default=False)


class ProjectSchema(TrackerSchema):
    strip_fields = ('title',)

    id = fields.Integer(dump_only=True)
    title = fields.String(required=True, validate=validate.Length(min=1))
    course = fields.String(allow_none=True)
    description = fields.String(allow_none=True)
    status = fields.String(load_default='Not Started')
    due_date = fields.Date(data_key='dueDate', allow_none=True)
    progress = fields.Integer(load_default=0, validate=validate.Range(min=0, max=100))
    group_members = fields.List(fields.String(), data_key='groupMembers', load_default=list)
    milestones = fields.List(fields.Nested(MilestoneSchema), load_default=list)
    objectives = fields.String(allow_none=True)
    deliverables = fields.String(allow_none=True)
    evaluation_criteria = fields.String(data_key='evaluationCriteria', allow_none=True)


class StoredProjectSchema(ProjectSchema):
    id = fields.Integer()


project_schema = ProjectSchema()
projects_schema = ProjectSchema(many=True)
stored_project_schema = StoredProjectSchema()
