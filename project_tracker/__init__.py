import logging
import os

from flask import Flask, request
from flask_sqlalchemy import SQLAlchemy
from flask_marshmallow import Marshmallow
from flask_cors import CORS

from .logging_config import setup_logging


db = SQLAlchemy()
ma = Marshmallow()

logger = logging.getLogger(__name__)

DEFAULT_URL_PREFIX = '/make-server-9a581a2b'


def _database_url():
    database_url = os.environ.get('DATABASE_URL')
    if not database_url:
        return 'sqlite:///project_tracker.db'
    # SQLAlchemy only accepts the postgresql:// scheme
    if database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)
    return database_url


def create_app(config=None):
    app = Flask(__name__)
    app.config['SQLALCHEMY_DATABASE_URI'] = _database_url()
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['URL_PREFIX'] = os.environ.get('URL_PREFIX', DEFAULT_URL_PREFIX).rstrip('/')
    app.config['SEED_DEFAULT_ACCOUNTS'] = os.environ.get('SEED_DEFAULT_ACCOUNTS', '1') not in ('0', 'false', 'False')
    app.config['LOG_LEVEL'] = os.environ.get('LOG_LEVEL', 'INFO')
    if config:
        app.config.update(config)

    setup_logging(app.config['LOG_LEVEL'])

    db.init_app(app)
    ma.init_app(app)
    CORS(
        app,
        origins="*",
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        expose_headers=["Content-Length"],
        max_age=600,
    )

    @app.after_request
    def log_request(response):
        logger.info("%s %s %s", request.method, request.path, response.status_code)
        return response

    with app.app_context():
        from .errors import register_error_handlers
        from .controllers.health_controller import health_blueprint
        from .controllers.account_controller import account_blueprint
        from .controllers.project_controller import project_blueprint
        from .controllers.submission_controller import submission_blueprint
        from .controllers.task_controller import task_blueprint
        from .controllers.message_controller import message_blueprint

        prefix = app.config['URL_PREFIX']
        register_error_handlers(app)
        app.register_blueprint(health_blueprint, url_prefix=prefix)
        app.register_blueprint(account_blueprint, url_prefix=prefix)
        app.register_blueprint(project_blueprint, url_prefix=prefix)
        app.register_blueprint(submission_blueprint, url_prefix=prefix)
        app.register_blueprint(task_blueprint, url_prefix=prefix)
        app.register_blueprint(message_blueprint, url_prefix=prefix)

        db.create_all()

        if app.config['SEED_DEFAULT_ACCOUNTS']:
            from .services.account_service import initialize_default_accounts
            initialize_default_accounts()

    return app
