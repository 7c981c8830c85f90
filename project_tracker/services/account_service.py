import logging

from sqlalchemy.exc import IntegrityError

from .. import db
from ..errors import DuplicateEmail, InvalidCredentials, InvalidRequest
from ..models.account_model import Account, ADMIN, STUDENT
from ..schemas.account_schema import account_schema


logger = logging.getLogger(__name__)


DEFAULT_ACCOUNTS = [
    {
        "email": "ramcharan123@gmail.com",
        "password": "1234",
        "userType": ADMIN,
        "fullName": "Ram Charan",
        "phoneNumber": "9876543210",
        "department": "Computer Science",
        "profileComplete": True,
    },
    {
        "email": "anilpagadala583@gmail.com",
        "password": "1234",
        "userType": ADMIN,
        "fullName": "Anil Pagadala",
        "phoneNumber": "9876543211",
        "department": "Information Technology",
        "profileComplete": True,
    },
    {
        "email": "rahul123@gmail.com",
        "password": "1234567",
        "userType": ADMIN,
        "fullName": "Rahul Kumar",
        "phoneNumber": "9876543212",
        "department": "Computer Science",
        "profileComplete": True,
    },
    {
        "email": "2400030525@kluniversity.in",
        "password": "12345",
        "userType": STUDENT,
        "fullName": "John Doe",
        "studentId": "2400030525",
        "phoneNumber": "9876543213",
        "department": "Computer Science",
        "academicYear": "3",
        "profileComplete": True,
    },
]


def get_accounts():
    return Account.query.order_by(Account.id).all()


def get_account_by_email(email):
    return Account.query.filter_by(email=email).first()


def create_account(data):
    fields = account_schema.load(data)

    if get_account_by_email(fields['email']):
        raise DuplicateEmail()

    new_account = Account(**fields)
    db.session.add(new_account)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise DuplicateEmail()

    logger.info("Created %s account %s (id=%s)", new_account.user_type, new_account.email, new_account.id)
    return new_account


def register_account(user_type, data):
    return create_account({**data, 'userType': user_type, 'profileComplete': False})


def create_student_account(data):
    """Admin-driven creation: the student skips profile setup."""
    return create_account({**data, 'userType': STUDENT, 'profileComplete': True})


def update_account(email, data):
    account = get_account_by_email(email)
    if not account:
        logger.info("Ignoring update for unknown account %s", email)
        return None

    changes = account_schema.load(data, partial=True)

    new_email = changes.get('email')
    if new_email and new_email != email and get_account_by_email(new_email):
        raise DuplicateEmail()

    for attribute, value in changes.items():
        setattr(account, attribute, value)

    db.session.commit()
    return account


def complete_profile(email, data):
    if not isinstance(data, dict):
        raise InvalidRequest("Profile details are required")
    # Average grade is only ever set by an admin afterwards
    return update_account(email, {**data, 'profileComplete': True, 'averageGrade': None})


def check_account(email, password, user_type=None):
    account = get_account_by_email(email)
    if not account or account.password != password:
        raise InvalidCredentials()
    if user_type and account.user_type != user_type:
        raise InvalidCredentials()
    return account


def initialize_default_accounts():
    if Account.query.first() is not None:
        return False

    for account_data in DEFAULT_ACCOUNTS:
        db.session.add(Account(**account_schema.load(account_data)))
    db.session.commit()
    logger.info("Default accounts initialized")
    return True
