from datetime import datetime, time, timezone
from .. import db


class Project(db.Model):
    __tablename__ = 'projects'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    course = db.Column(db.String(120), nullable=True)
    description = db.Column(db.Text, nullable=True)
    status = db.Column(db.String(50), nullable=False, default='Not Started')
    due_date = db.Column(db.Date, nullable=True)
    progress = db.Column(db.Integer, nullable=False, default=0)
    # Ordered member names and milestone dicts ({id, name, completed})
    group_members = db.Column(db.JSON, nullable=False, default=list)
    milestones = db.Column(db.JSON, nullable=False, default=list)
    objectives = db.Column(db.Text, nullable=True)
    deliverables = db.Column(db.Text, nullable=True)
    evaluation_criteria = db.Column(db.Text, nullable=True)
    created_on = db.Column(db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    def is_expired(self, now):
        # A due date means midnight UTC at the start of that day
        if self.due_date is None:
            return False
        return datetime.combine(self.due_date, time.min, tzinfo=timezone.utc) < now
