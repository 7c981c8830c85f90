import logging

from .. import db
from ..errors import PermissionDenied
from ..models.task_model import Task
from ..policy import ensure_task_editor
from ..schemas.task_schema import task_schema, task_status_schema
from .account_service import get_account_by_email


logger = logging.getLogger(__name__)


def get_tasks(project_id=None, assignee=None):
    query = Task.query
    if project_id is not None:
        query = query.filter_by(project_id=project_id)
    if assignee is not None:
        query = query.filter_by(assignee=assignee)
    return query.order_by(Task.id).all()


def get_task(task_id):
    return db.session.get(Task, task_id)


def create_task(data):
    new_task = Task(**task_schema.load(data))

    db.session.add(new_task)
    db.session.commit()
    logger.info("Created task %s for %s in project %s", new_task.id, new_task.assignee, new_task.project_id)
    return new_task


def update_task(task_id, data):
    task = get_task(task_id)
    if not task:
        return None

    changes = task_schema.load(data, partial=True)
    for attribute, value in changes.items():
        setattr(task, attribute, value)

    db.session.commit()
    return task


def update_task_status(task_id, data):
    fields = task_status_schema.load(data)

    task = get_task(task_id)
    if not task:
        return None

    actor = get_account_by_email(fields['actor_email'])
    if actor is None:
        raise PermissionDenied("Unknown account")
    ensure_task_editor(actor.user_type, actor.full_name, task.assignee)

    task.status = fields['status']
    db.session.commit()
    return task
