"""Errors raised by the JSON request helpers."""


class WebJsonError(Exception):
    """Base class for web_json errors."""


class MalformedJson(WebJsonError, ValueError):
    """The request body is not valid JSON."""


class UnserializableValue(WebJsonError, TypeError):
    """A value has no JSON representation."""
