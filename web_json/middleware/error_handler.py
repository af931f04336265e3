import logging
from functools import wraps
from flask import current_app

from web_json.errors import MalformedJson, UnserializableValue
from web_json.helpers.response_formatter import build_error
from web_json.utils.config import DEFAULT_CONFIG

logger = logging.getLogger("web_json")


def json_error(message, status_code):
    """Build a JSON error response with the current app's configuration."""
    config = current_app.extensions.get("web_json", DEFAULT_CONFIG)
    return build_error(
        message, status_code, config=config, response_class=current_app.response_class
    )


def handle_errors(f):
    """Middleware for consistent API error handling."""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (MalformedJson, UnserializableValue):
            # Translated by the app-level handlers
            raise
        except Exception as e:
            logger.error(f"Error in {f.__name__}: {str(e)}")

            # Different error message based on environment
            if logger.getEffectiveLevel() <= logging.DEBUG:
                # In debug mode, include the full error message
                return json_error(f"Internal server error: {str(e)}", 500)
            else:
                # In production, show a generic message
                return json_error("Internal server error", 500)

    return decorated_function


def register_error_handlers(app):
    """Register handlers translating JSON helper errors into JSON responses."""

    @app.errorhandler(MalformedJson)
    def malformed_json(e):
        return json_error(str(e), 400)

    @app.errorhandler(UnserializableValue)
    def unserializable_value(e):
        logger.error(f"Response data could not be serialized: {str(e)}")
        return json_error("Internal server error", 500)


def register_http_error_handlers(app):
    """Register JSON 404 and 500 handlers for apps built by create_app."""

    @app.errorhandler(404)
    def not_found(e):
        return json_error("Endpoint not found", 404)

    @app.errorhandler(500)
    def server_error(e):
        return json_error("Internal server error", 500)
