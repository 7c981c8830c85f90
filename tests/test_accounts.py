import pytest

from conftest import fake, url


@pytest.fixture
def account_data():
    return {
        'email': fake.unique.email(),
        'password': 'secret',
        'userType': 'student',
        'fullName': fake.name(),
        'studentId': '2400030099',
    }


def test_create_account(client, account_data):
    response = client.post(url('/accounts'), json=account_data)

    assert response.status_code == 200
    data = response.get_json()
    assert data['success'] is True
    assert data['account']['email'] == account_data['email']
    assert data['account']['userType'] == 'student'
    assert 'id' in data['account']
    assert 'password' not in data['account']


def test_account_ids_increase(client, account_data):
    first = client.post(url('/accounts'), json=account_data).get_json()['account']
    second = client.post(url('/accounts'), json={**account_data, 'email': fake.unique.email()}).get_json()['account']

    assert second['id'] == first['id'] + 1


def test_client_supplied_id_is_ignored(client, account_data):
    response = client.post(url('/accounts'), json={**account_data, 'id': 999})

    assert response.get_json()['account']['id'] != 999


def test_duplicate_email_rejected(client, account_data):
    client.post(url('/accounts'), json=account_data)
    response = client.post(url('/accounts'), json={**account_data, 'fullName': 'Someone Else'})

    assert response.status_code == 400
    assert response.get_json() == {'success': False, 'error': 'Email already exists'}

    accounts = client.get(url('/accounts')).get_json()['accounts']
    assert [a['email'] for a in accounts].count(account_data['email']) == 1


def test_invalid_user_type_rejected(client, account_data):
    response = client.post(url('/accounts'), json={**account_data, 'userType': 'teacher'})

    assert response.status_code == 400
    assert 'userType' in response.get_json()['error']


def test_update_account_merges_patch(client, account_data):
    client.post(url('/accounts'), json=account_data)

    response = client.put(url(f"/accounts/{account_data['email']}"), json={'academicYear': '3'})

    account = response.get_json()['account']
    assert account['academicYear'] == '3'
    assert account['fullName'] == account_data['fullName']


def test_update_account_is_idempotent(client, account_data):
    client.post(url('/accounts'), json=account_data)
    patch = {'phoneNumber': '9876500000', 'branch': 'CSE'}

    first = client.put(url(f"/accounts/{account_data['email']}"), json=patch).get_json()['account']
    second = client.put(url(f"/accounts/{account_data['email']}"), json=patch).get_json()['account']

    assert first == second


def test_update_unknown_account_is_noop(client):
    response = client.put(url('/accounts/nobody@example.com'), json={'fullName': 'Ghost'})

    assert response.status_code == 200
    assert response.get_json() == {'success': True, 'account': None}
    assert client.get(url('/accounts')).get_json()['accounts'] == []


def test_update_email_to_existing_rejected(client, account_data):
    other_email = fake.unique.email()
    client.post(url('/accounts'), json=account_data)
    client.post(url('/accounts'), json={**account_data, 'email': other_email})

    response = client.put(url(f"/accounts/{account_data['email']}"), json={'email': other_email})

    assert response.status_code == 400


def test_student_bulk_creation_skips_profile_setup(client):
    response = client.post(url('/accounts/students'), json={
        'email': fake.unique.email(),
        'password': 'pw',
        'userType': 'admin',
        'fullName': 'Karthik S',
        'studentId': '2400030123',
    })

    account = response.get_json()['account']
    assert account['userType'] == 'student'
    assert account['profileComplete'] is True


def test_register_always_needs_profile_setup(client):
    response = client.post(url('/accounts/register/student'), json={
        'email': 'new@x.com', 'password': 'pw', 'userType': 'admin', 'profileComplete': True,
    })

    account = response.get_json()['account']
    assert response.status_code == 200
    assert account['userType'] == 'student'
    assert account['profileComplete'] is False


def test_register_unknown_user_type_rejected(client):
    response = client.post(url('/accounts/register/teacher'), json={'email': 'new@x.com', 'password': 'pw'})

    assert response.status_code == 400
    assert client.get(url('/accounts')).get_json()['accounts'] == []


def test_profile_setup(client):
    email = 'a@x.com'
    client.post(url('/accounts/register/student'), json={'email': email, 'password': '1'})

    response = client.put(url(f'/accounts/{email}/profile'), json={
        'fullName': 'Asha Verma',
        'studentId': '2400030525',
        'academicYear': '2',
        'averageGrade': 'A+',
    })

    account = response.get_json()['account']
    assert account['profileComplete'] is True
    assert account['fullName'] == 'Asha Verma'
    assert account['averageGrade'] is None


def test_profile_setup_needs_details(client):
    email = 'a@x.com'
    client.post(url('/accounts/register/student'), json={'email': email, 'password': '1'})

    response = client.put(url(f'/accounts/{email}/profile'), data='null', content_type='application/json')

    assert response.status_code == 400
    assert response.get_json() == {'success': False, 'error': 'Profile details are required'}


def test_login(client, account_data):
    client.post(url('/accounts'), json=account_data)

    response = client.post(url('/login'), json={
        'email': account_data['email'],
        'password': account_data['password'],
        'userType': 'student',
    })

    assert response.status_code == 200
    assert response.get_json()['account']['email'] == account_data['email']


@pytest.mark.parametrize('overrides', [
    {'password': 'wrong'},
    {'userType': 'admin'},
    {'email': 'missing@example.com'},
])
def test_login_rejected(client, account_data, overrides):
    client.post(url('/accounts'), json=account_data)
    credentials = {'email': account_data['email'], 'password': account_data['password'], **overrides}

    response = client.post(url('/login'), json=credentials)

    assert response.status_code == 401
    assert response.get_json()['success'] is False
