"""
Project tracker - test configuration and fixtures
"""
import pytest
from faker import Faker

from project_tracker import create_app, db

PREFIX = '/make-server-9a581a2b'
PDF_DATA_URL = 'data:application/pdf;base64,JVBERi0xLjQKJcTl8uXrp/Og0MTGCg=='

fake = Faker()


def url(path):
    return f"{PREFIX}{path}"


@pytest.fixture
def app():
    """App bound to a throwaway in-memory database"""
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'SEED_DEFAULT_ACCOUNTS': False,
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(client):
    """Create an admin account through the API"""
    response = client.post(url('/accounts'), json={
        'email': fake.unique.email(),
        'password': 'admin-pass',
        'userType': 'admin',
        'fullName': fake.name(),
        'department': 'Computer Science',
        'profileComplete': True,
    })
    assert response.status_code == 200
    return response.get_json()['account']


@pytest.fixture
def student(client):
    """Create a student account through the API"""
    response = client.post(url('/accounts'), json={
        'email': fake.unique.email(),
        'password': 'student-pass',
        'userType': 'student',
        'fullName': 'Priya Raman',
        'studentId': '2400030001',
        'academicYear': '2',
        'profileComplete': True,
    })
    assert response.status_code == 200
    return response.get_json()['account']


@pytest.fixture
def project(client):
    response = client.post(url('/projects'), json={
        'title': 'Library Management System',
        'course': 'FEDF',
        'status': 'In Progress',
        'dueDate': '2999-12-31',
        'groupMembers': ['Priya Raman'],
        'milestones': [{'id': 1, 'name': 'Design', 'completed': False}],
    })
    assert response.status_code == 200
    return response.get_json()['project']


@pytest.fixture
def submission_data(student, project):
    return {
        'projectId': project['id'],
        'projectTitle': project['title'],
        'studentId': student['studentId'],
        'studentName': student['fullName'],
        'pdfFile': PDF_DATA_URL,
        'pdfFileName': 'report.pdf',
        'projectLink': 'https://github.com/example/library',
        'description': 'Final report and source code',
    }
