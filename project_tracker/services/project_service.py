import datetime
import logging

from .. import db
from ..models.project_model import Project
from ..schemas.project_schema import project_schema


logger = logging.getLogger(__name__)


def get_projects(now=None):
    """Return live projects, purging the ones whose due date has passed."""
    now = now or datetime.datetime.now(datetime.timezone.utc)
    projects = Project.query.order_by(Project.id).all()

    live = [project for project in projects if not project.is_expired(now)]
    expired = [project for project in projects if project.is_expired(now)]
    if expired:
        expired_ids = [project.id for project in expired]
        for project in expired:
            db.session.delete(project)
        db.session.commit()
        logger.info("Removed %d expired project(s): %s", len(expired_ids), expired_ids)

    return live


def get_project(project_id):
    return db.session.get(Project, project_id)


def create_project(data):
    new_project = Project(**project_schema.load(data))

    db.session.add(new_project)
    db.session.commit()
    logger.info("Created project %s '%s'", new_project.id, new_project.title)
    return new_project


def update_project(project_id, data):
    project = get_project(project_id)
    if not project:
        return None

    changes = project_schema.load(data, partial=True)
    for attribute, value in changes.items():
        setattr(project, attribute, value)

    db.session.commit()
    return project


def update_project_members(project_id, members):
    return update_project(project_id, {'groupMembers': members})


def delete_project(project_id):
    project = get_project(project_id)
    if not project:
        return False

    db.session.delete(project)
    db.session.commit()
    logger.info("Deleted project %s", project_id)
    return True
