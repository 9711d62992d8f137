"""
Local library catalog.

Server-rendered CRUD over Books, Authors, Genres and BookInstances (copies):
- Flask blueprint with async handlers, one controller module per entity kind
- SQLAlchemy models behind injectable repositories
- WTForms validation/sanitization with CSRF protection (Flask-WTF)
- Templates embedded in ``locallibrary.templates``

Run:
    pip install -e .
    flask --app locallibrary init-db --sample
    flask --app locallibrary run
"""
import logging

from flask import Flask
from flask.logging import default_handler

from .cli import register_commands
from .config import Config
from .errors import register_error_handlers
from .extensions import csrf, db
from .repositories import init_app as init_repositories
from .routes import register_routes
from .templates import template_loader


def configure_logging(app):
    logger = logging.getLogger(__name__)
    if default_handler not in logger.handlers:
        logger.addHandler(default_handler)
    logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))


def create_app(config_object=None, repositories=None):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.jinja_loader = template_loader()

    configure_logging(app)
    db.init_app(app)
    csrf.init_app(app)
    init_repositories(app, repositories)

    register_routes(app)
    register_error_handlers(app)
    register_commands(app)
    return app
