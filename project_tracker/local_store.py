"""
Client-local persistence: the five collections kept as JSON-encoded lists
under the keys ``accounts``, ``projects``, ``submissions``, ``tasks`` and
``messages``.

Every mutation follows the same cycle: compute a new list from the in-memory
one, swap it in, and write the whole list back. Ids are millisecond
timestamps. Project expiry is not applied on this path.
"""

import datetime
import json
import logging
import time
from pathlib import Path

from .errors import DuplicateEmail, InvalidCredentials, InvalidRequest
from .models.account_model import STUDENT
from .models.submission_model import PENDING_REVIEW
from .policy import (
    can_delete_submission,
    check_submission_document,
    display_name,
    ensure_chat_member,
    ensure_deletable,
    ensure_reviewer,
    ensure_single_submission,
    ensure_submitter,
    ensure_task_editor,
    is_project_submitted,
    my_submission,
    my_tasks,
    project_messages,
    project_tasks,
)
from .schemas.account_schema import stored_account_schema
from .schemas.message_schema import stored_message_schema
from .schemas.project_schema import stored_project_schema
from .schemas.submission_schema import review_schema, stored_submission_schema
from .schemas.task_schema import stored_task_schema
from .services.account_service import DEFAULT_ACCOUNTS


logger = logging.getLogger(__name__)

COLLECTION_KEYS = ('accounts', 'projects', 'submissions', 'tasks', 'messages')


class LocalStorage:
    """String key/value storage backed by one file per key in a directory."""

    def __init__(self, directory):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key):
        return self.directory / f"{key}.json"

    def get_item(self, key):
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding='utf-8')

    def set_item(self, key, value):
        self._path(key).write_text(value, encoding='utf-8')


class LocalTracker:
    def __init__(self, storage, clock=time.time):
        self.storage = storage
        self._clock = clock
        self.accounts = []
        self.projects = []
        self.submissions = []
        self.tasks = []
        self.messages = []
        self.load_all()

    # -- persistence -----------------------------------------------------

    def load_collection(self, key):
        raw = self.storage.get_item(key)
        if raw is None:
            return []
        try:
            records = json.loads(raw)
        except ValueError:
            logger.warning("Stored '%s' is not valid JSON, starting from an empty list", key)
            return []
        if not isinstance(records, list):
            logger.warning("Stored '%s' is not a list, starting from an empty list", key)
            return []
        return records

    def save_collection(self, key, records):
        setattr(self, key, records)
        self.storage.set_item(key, json.dumps(records))

    def load_all(self):
        for key in COLLECTION_KEYS:
            setattr(self, key, self.load_collection(key))
        if not self.accounts:
            self.initialize_default_accounts()

    def initialize_default_accounts(self):
        accounts = []
        for account_id, account_data in enumerate(DEFAULT_ACCOUNTS, start=1):
            record = stored_account_schema.dump(stored_account_schema.load(account_data))
            record['id'] = account_id
            accounts.append(record)
        self.save_collection('accounts', accounts)
        logger.info("Default accounts initialized")

    def _next_id(self, records):
        new_id = int(self._clock() * 1000)
        taken = {record.get('id') for record in records}
        while new_id in taken:
            new_id += 1
        return new_id

    def _new_record(self, key, schema, data):
        records = getattr(self, key)
        record = schema.dump(schema.load(data))
        record['id'] = self._next_id(records)
        self.save_collection(key, records + [record])
        return record

    @staticmethod
    def _merge(record, schema, patch):
        changes = schema.dump(schema.load(patch, partial=True))
        changes.pop('id', None)
        return {**record, **changes}

    def _update_record(self, key, schema, record_id, patch):
        records = getattr(self, key)
        updated = [
            self._merge(record, schema, patch) if record.get('id') == record_id else record
            for record in records
        ]
        self.save_collection(key, updated)
        return self._find(key, record_id)

    def _find(self, key, record_id):
        for record in getattr(self, key):
            if record.get('id') == record_id:
                return record
        return None

    # -- accounts --------------------------------------------------------

    def find_account(self, email):
        for account in self.accounts:
            if account.get('email') == email:
                return account
        return None

    def create_account(self, data):
        if self.find_account((data.get('email') or '').strip()):
            raise DuplicateEmail()
        account = self._new_record('accounts', stored_account_schema, data)
        logger.info("Created %s account %s", account['userType'], account['email'])
        return account

    def register(self, user_type, data):
        return self.create_account({**data, 'userType': user_type, 'profileComplete': False})

    def create_student_account(self, data):
        return self.create_account({**data, 'userType': STUDENT, 'profileComplete': True})

    def update_account(self, email, patch):
        if self.find_account(email) is None:
            return None
        changes = stored_account_schema.dump(stored_account_schema.load(patch, partial=True))
        changes.pop('id', None)
        new_email = changes.get('email')
        if new_email and new_email != email and self.find_account(new_email):
            raise DuplicateEmail()

        updated = [
            {**account, **changes} if account.get('email') == email else account
            for account in self.accounts
        ]
        self.save_collection('accounts', updated)
        return self.find_account(new_email or email)

    def complete_profile(self, email, profile):
        if not isinstance(profile, dict):
            raise InvalidRequest("Profile details are required")
        return self.update_account(email, {**profile, 'profileComplete': True, 'averageGrade': None})

    def login(self, email, password, user_type=None):
        account = self.find_account(email)
        if account is None or account.get('password') != password:
            raise InvalidCredentials()
        if user_type and account.get('userType') != user_type:
            raise InvalidCredentials()
        return account

    # -- projects --------------------------------------------------------

    def list_projects(self):
        return list(self.projects)

    def create_project(self, data):
        return self._new_record('projects', stored_project_schema, data)

    def update_project(self, project_id, patch):
        return self._update_record('projects', stored_project_schema, project_id, patch)

    def update_project_members(self, project_id, members):
        return self.update_project(project_id, {'groupMembers': members})

    def delete_project(self, project_id):
        self.save_collection('projects', [p for p in self.projects if p.get('id') != project_id])

    # -- submissions -----------------------------------------------------

    def list_submissions(self):
        return list(self.submissions)

    def submit_work(self, student, project, data):
        """Record a student's submission for a project.

        ``data`` carries ``pdfFile`` (a data URL), ``pdfFileName``,
        ``description``, ``projectLink`` and ``notes``. A student gets one
        submission per project; a rejected or pending one must be deleted
        before resubmitting.
        """
        ensure_submitter(student.get('userType'))
        check_submission_document(data.get('pdfFile'), data.get('description'))
        ensure_single_submission(my_submission(self.submissions, project['id'], student.get('studentId')))

        payload = {
            'projectId': project['id'],
            'projectTitle': project.get('title'),
            'course': project.get('course'),
            'studentName': display_name(student),
            'studentId': student.get('studentId'),
            'submittedDate': datetime.date.today().isoformat(),
            'projectLink': data.get('projectLink') or '',
            'description': data.get('description'),
            'notes': data.get('notes') or '',
            'pdfFile': data.get('pdfFile'),
            'pdfFileName': data.get('pdfFileName'),
            'status': PENDING_REVIEW,
            'grade': None,
        }
        submission = self._new_record('submissions', stored_submission_schema, payload)
        logger.info("Student %s submitted project %s", submission['studentId'], submission['projectId'])
        return submission

    def update_submission(self, submission_id, patch):
        return self._update_record('submissions', stored_submission_schema, submission_id, patch)

    def review_submission(self, reviewer, submission_id, status, grade=None, feedback=None):
        ensure_reviewer(reviewer.get('userType'))
        review = review_schema.load({
            'reviewerEmail': reviewer.get('email'),
            'status': status,
            'grade': grade,
            'feedback': feedback,
        })
        return self.update_submission(submission_id, {
            'status': review['status'],
            'grade': review['grade'],
            'feedback': review['feedback'],
        })

    def delete_submission(self, submission_id):
        submission = self._find('submissions', submission_id)
        if submission is None:
            return False
        ensure_deletable(submission.get('status'))
        self.save_collection('submissions', [s for s in self.submissions if s.get('id') != submission_id])
        return True

    # -- tasks -----------------------------------------------------------

    def list_tasks(self):
        return list(self.tasks)

    def create_task(self, creator, project_id, data):
        payload = {
            'assignee': display_name(creator),
            **data,
            'projectId': project_id,
            'createdBy': display_name(creator),
        }
        return self._new_record('tasks', stored_task_schema, payload)

    def update_task(self, task_id, patch):
        return self._update_record('tasks', stored_task_schema, task_id, patch)

    def update_task_status(self, actor, task_id, status):
        task = self._find('tasks', task_id)
        if task is None:
            return None
        ensure_task_editor(actor.get('userType'), display_name(actor), task.get('assignee'))
        return self.update_task(task_id, {'status': status})

    # -- messages --------------------------------------------------------

    def list_messages(self, project_id=None):
        if project_id is None:
            return list(self.messages)
        return project_messages(self.messages, project_id)

    def send_message(self, sender, project_id, text):
        project = self._find('projects', project_id)
        if project is None:
            raise InvalidRequest(f"Project {project_id} does not exist")
        ensure_chat_member(sender.get('userType'), display_name(sender), project.get('groupMembers') or [])
        return self._new_record('messages', stored_message_schema, {
            'projectId': project_id,
            'sender': display_name(sender),
            'text': text,
            'timestamp': datetime.datetime.now(datetime.timezone.utc).isoformat(),
        })

    # -- views -----------------------------------------------------------

    def student_dashboard(self, student):
        """Per-project view for one student, plus the tasks assigned to them."""
        name = display_name(student)
        entries = []
        for project in self.projects:
            submission = my_submission(self.submissions, project['id'], student.get('studentId'))
            entries.append({
                'project': project,
                'submission': submission,
                'submitted': is_project_submitted(self.submissions, project['id'], student.get('studentId')),
                'canDeleteSubmission': submission is not None and can_delete_submission(submission.get('status')),
                'tasks': project_tasks(self.tasks, project['id']),
            })
        return {'projects': entries, 'myTasks': my_tasks(self.tasks, name)}
