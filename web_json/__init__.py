"""JSON helpers for Flask requests: decode JSON payloads, build JSON responses."""

from typing import Optional

from flask import Flask

from web_json.errors import MalformedJson, UnserializableValue, WebJsonError
from web_json.helpers.request_parser import decode_payload
from web_json.helpers.response_formatter import (
    PlainMessage, StructuredBody, build_error, build_response, error_body
)
from web_json.middleware.error_handler import (
    register_error_handlers, register_http_error_handlers
)
from web_json.request import JSONRequest, JSONRequestMixin, make_request_class
from web_json.utils.config import JsonHelperConfig, load_config
from web_json.utils.logger import get_logger, setup_logger

__version__ = "1.0.0"

__all__ = [
    "JSONRequest",
    "JSONRequestMixin",
    "JsonHelperConfig",
    "MalformedJson",
    "PlainMessage",
    "StructuredBody",
    "UnserializableValue",
    "WebJsonError",
    "build_error",
    "build_response",
    "create_app",
    "decode_payload",
    "error_body",
    "init_app",
    "load_config",
    "make_request_class",
]


def init_app(app: Flask, config: Optional[JsonHelperConfig] = None) -> Flask:
    """Attach the JSON helpers to an existing Flask app."""
    config = config or JsonHelperConfig()

    app.request_class = make_request_class(
        config, base=app.request_class, response_class=app.response_class
    )
    app.extensions["web_json"] = config
    register_error_handlers(app)

    get_logger().debug(f"JSON helpers enabled with content type {config.content_type}")
    return app


def create_app(config: Optional[JsonHelperConfig] = None) -> Flask:
    """Create and configure a Flask application with the JSON helpers."""
    if config is None:
        config = load_config()

    # Initialize logging
    setup_logger(config.log_level)

    app = Flask(__name__)
    register_http_error_handlers(app)
    return init_app(app, config)
