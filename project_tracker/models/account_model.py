from .. import db
from datetime import datetime, timezone

ADMIN = 'admin'
STUDENT = 'student'
USER_TYPES = (ADMIN, STUDENT)


class Account(db.Model):
    __tablename__ = 'accounts'
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password = db.Column(db.String(100), nullable=False)
    user_type = db.Column(db.String(20), nullable=False)
    full_name = db.Column(db.String(120), nullable=True)
    profile_complete = db.Column(db.Boolean, nullable=False, default=False)
    phone_number = db.Column(db.String(30), nullable=True)
    registered_on = db.Column(db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    # Admin fields
    department = db.Column(db.String(150), nullable=True)

    # Student fields
    student_id = db.Column(db.String(50), nullable=True)
    academic_year = db.Column(db.String(20), nullable=True)
    branch = db.Column(db.String(50), nullable=True)
    group_number = db.Column(db.String(20), nullable=True)
    average_grade = db.Column(db.String(20), nullable=True)
