import pytest

from project_tracker import policy
from project_tracker.errors import DuplicateSubmission, InvalidRequest, PermissionDenied, SubmissionLocked


@pytest.mark.parametrize('status, allowed', [
    ('Pending Review', True),
    ('Rejected', True),
    ('Accepted', False),
    ('Graded', False),
])
def test_can_delete_submission(status, allowed):
    assert policy.can_delete_submission(status) is allowed


def test_ensure_deletable_raises_for_locked_status():
    with pytest.raises(SubmissionLocked) as excinfo:
        policy.ensure_deletable('Graded')

    assert excinfo.value.status_code == 400
    assert 'Graded' in excinfo.value.message


def test_single_submission():
    policy.ensure_single_submission(None)
    with pytest.raises(DuplicateSubmission):
        policy.ensure_single_submission({'id': 1})


def test_only_admins_review():
    policy.ensure_reviewer('admin')
    with pytest.raises(PermissionDenied):
        policy.ensure_reviewer('student')


def test_task_editors():
    assert policy.can_update_task('admin', 'Ram Charan', 'Priya Raman')
    assert policy.can_update_task('student', 'Priya Raman', 'Priya Raman')
    assert not policy.can_update_task('student', 'Meena R', 'Priya Raman')
    assert not policy.can_update_task('student', None, None)


def test_chat_membership():
    policy.ensure_chat_member('admin', 'Ram Charan', [])
    policy.ensure_chat_member('student', 'Priya Raman', ['Priya Raman'])
    with pytest.raises(PermissionDenied):
        policy.ensure_chat_member('student', 'Meena R', ['Priya Raman'])


def test_submission_document_checks():
    policy.check_submission_document('data:application/pdf;base64,AAAA', 'Report')
    with pytest.raises(InvalidRequest):
        policy.check_submission_document('', 'Report')
    with pytest.raises(InvalidRequest):
        policy.check_submission_document('data:text/plain;base64,AAAA', 'Report')
    with pytest.raises(InvalidRequest):
        policy.check_submission_document('data:application/pdf;base64,AAAA', '  ')


def test_read_time_joins():
    tasks = [
        {'id': 1, 'projectId': 10, 'assignee': 'Priya Raman'},
        {'id': 2, 'projectId': 10, 'assignee': 'Meena R'},
        {'id': 3, 'projectId': 11, 'assignee': 'Priya Raman'},
    ]
    submissions = [{'id': 5, 'projectId': 10, 'studentId': 'S1'}]

    assert [t['id'] for t in policy.my_tasks(tasks, 'Priya Raman')] == [1, 3]
    assert [t['id'] for t in policy.project_tasks(tasks, 10)] == [1, 2]
    assert policy.my_submission(submissions, 10, 'S1')['id'] == 5
    assert policy.is_project_submitted(submissions, 10, 'S1')
    assert not policy.is_project_submitted(submissions, 11, 'S1')


def test_display_name_falls_back_to_name():
    assert policy.display_name({'fullName': 'Ram Charan', 'name': 'Rc'}) == 'Ram Charan'
    assert policy.display_name({'name': 'Rc'}) == 'Rc'
