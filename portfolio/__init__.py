import os

from flask import Flask
from werkzeug.exceptions import HTTPException

from .content import ContentError, NotFoundError

DEFAULT_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
DEFAULT_SITE_TITLE = "Massimo v1"

PLAIN_TEXT = {"Content-Type": "text/plain; charset=utf-8"}


def create_app(test_config=None):
    """Application factory function to create and configure the Flask app.

    Defaults are loaded with ``app.config.from_mapping``. When ``test_config``
    is given it is applied on top; otherwise ``PORTFOLIO_*`` environment
    variables (for example ``PORTFOLIO_DATA_DIR``) override the defaults.

    :param test_config: Optional mapping of config overrides.
    :type test_config: dict or None
    :returns: The configured application.
    :rtype: flask.Flask
    """
    app = Flask(__name__)

    app.config.from_mapping(
        DATA_DIR=DEFAULT_DATA_DIR,
        SITE_TITLE=DEFAULT_SITE_TITLE,
    )
    if test_config is None:
        app.config.from_prefixed_env("PORTFOLIO")
    else:
        app.config.update(test_config)

    # Import the blueprints and register them with the app
    from .views import views
    from .api import api

    app.register_blueprint(views, url_prefix='/')
    app.register_blueprint(api, url_prefix='/api')

    register_error_handlers(app)

    return app


def register_error_handlers(app):
    """Attach the 404 and 500 handlers.

    Both answer with short plain-text bodies. Faults are logged with their
    traceback but never echoed to the client.

    :param app: The application to configure.
    :type app: flask.Flask
    """

    # Routes are GET-only; any other method is treated as an unmatched route.
    @app.errorhandler(404)
    @app.errorhandler(405)
    @app.errorhandler(NotFoundError)
    def not_found(e):
        return "Not found", 404, PLAIN_TEXT

    @app.errorhandler(ContentError)
    def content_error(e):
        app.logger.exception("Failed to load content: %s", e)
        return "Server error", 500, PLAIN_TEXT

    @app.errorhandler(Exception)
    def server_error(e):
        # Leave other HTTP errors to Werkzeug's default responses.
        if isinstance(e, HTTPException):
            return e
        app.logger.exception("Unhandled error: %s", e)
        return "Server error", 500, PLAIN_TEXT
