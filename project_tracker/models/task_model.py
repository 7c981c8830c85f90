from .. import db

TODO = 'Todo'
IN_PROGRESS = 'In Progress'
COMPLETED = 'Completed'
TASK_STATUSES = (TODO, IN_PROGRESS, COMPLETED)
TASK_PRIORITIES = ('Low', 'Medium', 'High')


class Task(db.Model):
    __tablename__ = 'tasks'

    id = db.Column(db.Integer, primary_key=True)
    project_id = db.Column(db.Integer, nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    assignee = db.Column(db.String(120), nullable=False)  # account full name
    priority = db.Column(db.String(20), nullable=False, default='Medium')
    due_date = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=TODO)
    created_by = db.Column(db.String(120), nullable=True)
