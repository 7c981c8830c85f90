import datetime
import logging

from .. import db
from ..errors import PermissionDenied
from ..models.submission_model import Submission, PENDING_REVIEW
from ..policy import check_submission_document, ensure_deletable, ensure_reviewer, ensure_single_submission
from ..schemas.submission_schema import review_schema, submission_schema
from .account_service import get_account_by_email


logger = logging.getLogger(__name__)


def get_submissions(project_id=None, student_id=None):
    query = Submission.query
    if project_id is not None:
        query = query.filter_by(project_id=project_id)
    if student_id is not None:
        query = query.filter_by(student_id=student_id)
    return query.order_by(Submission.id).all()


def get_submission(submission_id):
    return db.session.get(Submission, submission_id)


def find_submission(project_id, student_id):
    return Submission.query.filter_by(project_id=project_id, student_id=student_id).first()


def create_submission(data):
    fields = submission_schema.load(data)
    check_submission_document(fields.get('pdf_file'), fields.get('description'))
    ensure_single_submission(find_submission(fields['project_id'], fields['student_id']))

    # Every new submission starts unreviewed
    fields.update(status=PENDING_REVIEW, grade=None, feedback=None)
    fields.setdefault('submitted_date', datetime.date.today())

    new_submission = Submission(**fields)
    db.session.add(new_submission)
    db.session.commit()
    logger.info(
        "Student %s submitted project %s (submission %s)",
        new_submission.student_id, new_submission.project_id, new_submission.id,
    )
    return new_submission


def update_submission(submission_id, data):
    submission = get_submission(submission_id)
    if not submission:
        return None

    changes = submission_schema.load(data, partial=True)
    for attribute, value in changes.items():
        setattr(submission, attribute, value)

    db.session.commit()
    return submission


def review_submission(submission_id, data):
    review = review_schema.load(data)

    reviewer = get_account_by_email(review['reviewer_email'])
    if reviewer is None:
        raise PermissionDenied("Unknown reviewer")
    ensure_reviewer(reviewer.user_type)

    submission = get_submission(submission_id)
    if not submission:
        return None

    submission.status = review['status']
    submission.grade = review['grade']
    submission.feedback = review['feedback']
    db.session.commit()

    logger.info("%s marked submission %s as %s", reviewer.email, submission.id, submission.status)
    return submission


def delete_submission(submission_id):
    submission = get_submission(submission_id)
    if not submission:
        return False

    ensure_deletable(submission.status)

    db.session.delete(submission)
    db.session.commit()
    logger.info("Deleted submission %s", submission_id)
    return True
