"""
Ownership and authorization rules layered over the plain records.

The checks take plain values so the SQL services and the local store can
share them. The lookup helpers at the bottom work on camelCase record dicts,
the shape both the REST responses and the local store use.
"""

from .errors import DuplicateSubmission, InvalidRequest, PermissionDenied, SubmissionLocked
from .models.account_model import ADMIN, STUDENT
from .models.submission_model import ACCEPTED, GRADED

LOCKED_SUBMISSION_STATUSES = (ACCEPTED, GRADED)
PDF_DATA_URL_PREFIX = 'data:application/pdf'


def can_delete_submission(status):
    return status not in LOCKED_SUBMISSION_STATUSES


def ensure_deletable(status):
    if not can_delete_submission(status):
        raise SubmissionLocked(status)


def ensure_single_submission(existing):
    if existing is not None:
        raise DuplicateSubmission()


def ensure_reviewer(user_type):
    if user_type != ADMIN:
        raise PermissionDenied("Only admins can review submissions")


def ensure_submitter(user_type):
    if user_type != STUDENT:
        raise PermissionDenied("Only students can submit work")


def can_update_task(user_type, full_name, assignee):
    return user_type == ADMIN or (full_name is not None and full_name == assignee)


def ensure_task_editor(user_type, full_name, assignee):
    if not can_update_task(user_type, full_name, assignee):
        raise PermissionDenied("Only the assignee or an admin can update this task")


def ensure_chat_member(user_type, full_name, group_members):
    if user_type != ADMIN and full_name not in group_members:
        raise PermissionDenied("Only group members can post in this chat")


def check_submission_document(pdf_file, description):
    """A submission needs an uploaded PDF and a non-empty description."""
    if not pdf_file:
        raise InvalidRequest("Please upload a PDF file")
    if pdf_file.startswith('data:') and not pdf_file.startswith(PDF_DATA_URL_PREFIX):
        raise InvalidRequest("Please upload only PDF files")
    if not description or not description.strip():
        raise InvalidRequest("Please provide a description of your work")


def display_name(account):
    return account.get('fullName') or account.get('name')


def my_tasks(tasks, full_name):
    return [task for task in tasks if task.get('assignee') == full_name]


def project_tasks(tasks, project_id):
    return [task for task in tasks if task.get('projectId') == project_id]


def project_messages(messages, project_id):
    return [message for message in messages if message.get('projectId') == project_id]


def my_submission(submissions, project_id, student_id):
    for submission in submissions:
        if submission.get('projectId') == project_id and submission.get('studentId') == student_id:
            return submission
    return None


def is_project_submitted(submissions, project_id, student_id):
    return my_submission(submissions, project_id, student_id) is not None
