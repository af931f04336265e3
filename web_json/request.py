"""Request class role adding JSON helpers to Flask requests."""

from typing import Optional

from flask import Request, Response

from web_json.helpers.request_parser import decode_payload
from web_json.helpers.response_formatter import build_error, build_response
from web_json.utils.config import DEFAULT_CONFIG, JsonHelperConfig


class JSONRequestMixin:
    """Adds JSON decoding and JSON response helpers to a request class.

    Mix into a werkzeug/Flask request class, or use make_request_class()
    to bind a configuration and response class.
    """

    json_config: JsonHelperConfig = DEFAULT_CONFIG
    json_response_class = Response

    def decoded_json_content(self):
        """Decode the request body as JSON."""
        return decode_payload(self)

    def new_json_response(self, data, headers=None, status: Optional[int] = None):
        """Convert data to JSON and build a response with the JSON content type."""
        return build_response(
            data,
            headers,
            status,
            config=self.json_config,
            response_class=self.json_response_class,
        )

    def new_json_error(self, message, status: Optional[int] = None):
        """Build a JSON error response from a message string or a data structure."""
        return build_error(
            message,
            status,
            config=self.json_config,
            response_class=self.json_response_class,
        )


class JSONRequest(JSONRequestMixin, Request):
    """Flask request with the JSON helpers and the default configuration."""


def make_request_class(config: JsonHelperConfig = DEFAULT_CONFIG, base=Request, response_class=Response):
    """Create a request class with the JSON helpers bound to config."""
    if issubclass(base, JSONRequestMixin):
        bases = (base,)
    else:
        bases = (JSONRequestMixin, base)

    return type(
        "JSONRequest",
        bases,
        {"json_config": config, "json_response_class": response_class},
    )
