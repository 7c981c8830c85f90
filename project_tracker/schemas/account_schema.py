from marshmallow import fields, validate

from .base_schema import TrackerSchema
from ..models.account_model import USER_TYPES


class AccountSchema(TrackerSchema):
    strip_fields = ('email', 'fullName')

    id = fields.Integer(dump_only=True)
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=1))
    user_type = fields.String(data_key='userType', required=True, validate=validate.OneOf(USER_TYPES))
    full_name = fields.String(data_key='fullName', allow_none=True)
    profile_complete = fields.Boolean(data_key='profileComplete')
    phone_number = fields.String(data_key='phoneNumber', allow_none=True)
    department = fields.String(allow_none=True)
    student_id = fields.String(data_key='studentId', allow_none=True)
    academic_year = fields.String(data_key='academicYear', allow_none=True)
    branch = fields.String(allow_none=True)
    group_number = fields.String(data_key='groupNumber', allow_none=True)
    average_grade = fields.String(data_key='averageGrade', allow_none=True)


class StoredAccountSchema(AccountSchema):
    """Local storage keeps the password alongside the rest of the record."""

    id = fields.Integer()
    password = fields.String(required=True, validate=validate.Length(min=1))


class LoginSchema(TrackerSchema):
    strip_fields = ('email',)

    email = fields.String(required=True)
    password = fields.String(required=True)
    user_type = fields.String(data_key='userType', load_default=None, allow_none=True, validate=validate.OneOf(USER_TYPES))


account_schema = AccountSchema()
accounts_schema = AccountSchema(many=True)
stored_account_schema = StoredAccountSchema()
login_schema = LoginSchema()
