import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from flask import Response
from werkzeug.datastructures import Headers

from web_json.errors import UnserializableValue
from web_json.utils.config import DEFAULT_CONFIG, JsonHelperConfig

logger = logging.getLogger('web_json')

DEFAULT_SUCCESS_STATUS = 200
DEFAULT_ERROR_STATUS = 400


@dataclass(frozen=True)
class PlainMessage:
    """An error given as a plain string, wrapped in the standard error object."""
    message: str

    def to_json(self) -> Dict[str, str]:
        return {'status': 'error', 'message': self.message}


@dataclass(frozen=True)
class StructuredBody:
    """An error given as a data structure, sent as-is."""
    body: Any

    def to_json(self) -> Any:
        return self.body


ErrorBody = Union[PlainMessage, StructuredBody]


def error_body(message) -> ErrorBody:
    """Pick the error body variant for a caller-supplied message."""
    if isinstance(message, (PlainMessage, StructuredBody)):
        return message
    if isinstance(message, (dict, list, tuple)):
        return StructuredBody(message)
    return PlainMessage(str(message))


def encode_json(data) -> str:
    """Serialize data to JSON text.

    The result is characters, not bytes: the response layer encodes it
    exactly once when it is sent.
    """
    try:
        return json.dumps(data, ensure_ascii=False, allow_nan=False, separators=(',', ':'))
    except (TypeError, ValueError, RecursionError) as e:
        logger.error(f"Cannot serialize response data: {str(e)}")
        raise UnserializableValue(str(e)) from e


def _json_response(body, headers, status, config, response_class):
    content = encode_json(body)
    # Set after the caller's headers so it always wins
    headers['Content-Type'] = config.content_type
    return response_class(response=content, status=status, headers=headers)


def build_response(
    data,
    extra_headers=None,
    status: Optional[int] = None,
    config: JsonHelperConfig = DEFAULT_CONFIG,
    response_class=Response,
):
    """Convert data to JSON and build a response with the JSON content type.

    extra_headers may be a mapping or a list of (name, value) pairs. A
    missing or falsy status means 200. Status codes are not validated.
    """
    return _json_response(data, Headers(extra_headers), status or DEFAULT_SUCCESS_STATUS, config, response_class)


def build_error(
    message,
    status: Optional[int] = None,
    config: JsonHelperConfig = DEFAULT_CONFIG,
    response_class=Response,
):
    """Build a JSON error response.

    A plain string becomes {"status": "error", "message": ...}; a data
    structure is sent verbatim. A missing or falsy status means 400.
    """
    body = error_body(message)
    return _json_response(body.to_json(), Headers(), status or DEFAULT_ERROR_STATUS, config, response_class)
