from project_tracker import create_app, db
from project_tracker.services.account_service import DEFAULT_ACCOUNTS

from conftest import url


def test_health(client):
    response = client.get(url('/health'))

    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok'}


def test_cors_is_open_to_any_origin(client):
    response = client.get(url('/health'), headers={'Origin': 'https://frontend.example'})

    assert response.headers['Access-Control-Allow-Origin'] == '*'


def test_unknown_route_returns_json_error(client):
    response = client.get(url('/nothing-here'))

    assert response.status_code == 404
    assert response.get_json()['success'] is False


def test_url_prefix_is_configurable():
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'SEED_DEFAULT_ACCOUNTS': False,
        'URL_PREFIX': '/api',
    })
    try:
        response = app.test_client().get('/api/health')
        assert response.status_code == 200
    finally:
        with app.app_context():
            db.drop_all()


def test_default_accounts_seeded_once():
    app = create_app({'TESTING': True, 'SQLALCHEMY_DATABASE_URI': 'sqlite://'})
    try:
        client = app.test_client()
        accounts = client.get(url('/accounts')).get_json()['accounts']

        assert [a['email'] for a in accounts] == [a['email'] for a in DEFAULT_ACCOUNTS]
        assert all('password' not in account for account in accounts)

        # Seeding only runs against an empty table
        from project_tracker.services.account_service import initialize_default_accounts
        with app.app_context():
            assert initialize_default_accounts() is False
    finally:
        with app.app_context():
            db.drop_all()
