from .. import db

PENDING_REVIEW = 'Pending Review'
ACCEPTED = 'Accepted'
REJECTED = 'Rejected'
GRADED = 'Graded'
SUBMISSION_STATUSES = (PENDING_REVIEW, ACCEPTED, REJECTED, GRADED)


class Submission(db.Model):
    __tablename__ = 'submissions'

    id = db.Column(db.Integer, primary_key=True)
    project_id = db.Column(db.Integer, nullable=False, index=True)
    project_title = db.Column(db.String(200), nullable=True)
    course = db.Column(db.String(120), nullable=True)
    student_id = db.Column(db.String(50), nullable=False, index=True)
    student_name = db.Column(db.String(120), nullable=True)
    submitted_date = db.Column(db.Date, nullable=True)
    status = db.Column(db.String(30), nullable=False, default=PENDING_REVIEW)
    grade = db.Column(db.String(20), nullable=True)
    feedback = db.Column(db.Text, nullable=True)
    pdf_file = db.Column(db.Text, nullable=True)  # data URL
    pdf_file_name = db.Column(db.String(255), nullable=True)
    project_link = db.Column(db.String(500), nullable=True)
    description = db.Column(db.Text, nullable=True)
    notes = db.Column(db.Text, nullable=True)
