from marshmallow import fields, validate

from .base_schema import TrackerSchema
from ..models.submission_model import PENDING_REVIEW, SUBMISSION_STATUSES, REJECTED, ACCEPTED, GRADED


class SubmissionSchema(TrackerSchema):
    strip_fields = ('projectLink', 'description', 'notes')

    id = fields.Integer(dump_only=True)
    project_id = fields.Integer(data_key='projectId', required=True)
    project_title = fields.String(data_key='projectTitle', allow_none=True)
    course = fields.String(allow_none=True)
    student_id = fields.String(data_key='studentId', required=True, validate=validate.Length(min=1))
    student_name = fields.String(data_key='studentName', allow_none=True)
    submitted_date = fields.Date(data_key='submittedDate', allow_none=True)
    status = fields.String(load_default=PENDING_REVIEW, validate=validate.OneOf(SUBMISSION_STATUSES))
    grade = fields.String(allow_none=True, load_default=None)
    feedback = fields.String(allow_none=True, load_default=None)
    pdf_file = fields.String(data_key='pdfFile', allow_none=True)
    pdf_file_name = fields.String(data_key='pdfFileName', allow_none=True)
    project_link = fields.String(data_key='projectLink', allow_none=True)
    description = fields.String(allow_none=True)
    notes = fields.String(allow_none=True)


class StoredSubmissionSchema(SubmissionSchema):
    id = fields.Integer()


class ReviewSchema(TrackerSchema):
    """Admin decision on a submission."""

    reviewer_email = fields.String(data_key='reviewerEmail', required=True)
    status = fields.String(required=True, validate=validate.OneOf((ACCEPTED, REJECTED, GRADED)))
    grade = fields.String(allow_none=True, load_default=None)
    feedback = fields.String(allow_none=True, load_default=None)


submission_schema = SubmissionSchema()
submissions_schema = SubmissionSchema(many=True)
stored_submission_schema = StoredSubmissionSchema()
review_schema = ReviewSchema()
