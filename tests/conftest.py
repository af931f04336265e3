import os
import sys
import pytest
from flask import Flask, request

# Add the project root to the path for proper imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from web_json import create_app, init_app
from web_json.routes import demo
from web_json.utils.config import JsonHelperConfig


@pytest.fixture
def config():
    return JsonHelperConfig()


@pytest.fixture
def charset_config():
    return JsonHelperConfig(content_type="application/json; charset=utf-8")


# App with the demo routes
@pytest.fixture
def app(config):
    app = create_app(config)
    app.config["TESTING"] = True
    demo.register_routes(app)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


# Plain Flask app with the helpers attached afterwards
@pytest.fixture
def plain_app(charset_config):
    app = Flask(__name__)
    init_app(app, charset_config)
    return app


@pytest.fixture
def make_request(app):
    """Build a request object with the given body inside a request context."""
    contexts = []

    def _make(data=b"", content_type="application/json", **kwargs):
        ctx = app.test_request_context(
            "/", method="POST", data=data, content_type=content_type, **kwargs
        )
        ctx.push()
        contexts.append(ctx)
        return request._get_current_object()

    yield _make

    for ctx in reversed(contexts):
        ctx.pop()
