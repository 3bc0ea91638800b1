from flask import Flask, current_app
from minihub.config import Config
from minihub.core import Hub
from minihub.errors import MiniHubError
from minihub.middleware import MethodOverrideMiddleware
from minihub.storage import JsonFileStorage
from minihub.utils import timeago_filter, markdown_filter, is_markdown
from minihub.routes import repo_bp, files_bp


def create_app(config_overrides=None, hub=None):
    """
    Build the Flask app.

    Args:
        config_overrides: Mapping applied on top of Config (tests set DATA_PATH here)
        hub: Hub to serve; by default one is loaded from the JSON file at DATA_PATH

    Returns:
        Flask application
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    if hub is None:
        hub = Hub(JsonFileStorage(app.config['DATA_PATH']))
    app.extensions['minihub'] = hub

    # Forms can only POST, let ?_method=DELETE through as a DELETE
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    # Register blueprints
    app.register_blueprint(repo_bp)
    app.register_blueprint(files_bp)

    # Register template filters
    app.template_filter('timeago')(timeago_filter)
    app.template_filter('markdown')(markdown_filter)
    app.jinja_env.tests['markdown'] = is_markdown

    app.register_error_handler(MiniHubError, handle_error)

    return app


def get_hub() -> Hub:
    """Hub of the app serving the current request"""
    return current_app.extensions['minihub']


def handle_error(error: MiniHubError):
    """Plain-text error page carrying the error's status code"""
    if error.status_code >= 500:
        current_app.logger.error(f"Request failed: {error}", exc_info=error)
    return str(error), error.status_code, {'Content-Type': 'text/plain; charset=utf-8'}
